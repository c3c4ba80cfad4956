class ToolDispatcher:
    """
    Lightweight router for canvas pointer events.

    Accepts any canvas object that exposes the expected callback attributes
    (on_pointer_down, on_pointer_move, on_pointer_up) and a
    ``refresh_overlay()`` method. It does not depend on Qt or
    AnnotationCanvas directly.

    Handlers receive raster pixel coordinates and return True when the overlay
    has to be redrawn.
    """
    def __init__(self, canvas):
        self.canvas = canvas
        self._down = None
        self._move = None
        self._up = None
        # bind shims
        self.canvas.on_pointer_down = self._shim_down
        self.canvas.on_pointer_move = self._shim_move
        self.canvas.on_pointer_up = self._shim_up

    def set_handlers(self, down=None, move=None, up=None):
        self._down = down
        self._move = move
        self._up = up

    def bind_controller(self, controller):
        """Route all three pointer events to an InteractionController."""
        self.set_handlers(controller.pointer_down, controller.pointer_move, controller.pointer_up)

    # disconnect everything on teardown
    def clear(self):
        self.set_handlers()

    def _redraw_if(self, changed):
        if changed:
            self.canvas.refresh_overlay()

    def _shim_down(self, x, y, modifiers):
        if callable(self._down): self._redraw_if(self._down(x, y, modifiers))
    def _shim_move(self, x, y):
        if callable(self._move): self._redraw_if(self._move(x, y))
    def _shim_up(self, x, y):
        if callable(self._up): self._redraw_if(self._up(x, y))
