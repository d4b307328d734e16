"""Gradients — builds the palette dataset served to the gradients UI."""
