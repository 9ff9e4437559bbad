"""Tkinter control panel."""
