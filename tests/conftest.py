"""Test harness configuration."""

import pyglet

# Headless test environments have no X display; importing pyglet.window would
# otherwise try to create a hidden shadow GL window at import time.
pyglet.options["shadow_window"] = False
