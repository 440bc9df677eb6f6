"""Immediate-mode GUI elements that read an input state and draw through a renderer."""