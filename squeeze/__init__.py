"""Squeeze: resolve asset paths in stylesheets and scripts."""
