"""PyQt6 viewer for the random-move demo."""
