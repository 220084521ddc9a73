from .render import render, render_keys

__all__ = ["render", "render_keys"]
