"""Editor-wide state living on the editor entity."""
from dataclasses import dataclass


@dataclass
class EditorState:
    """Singleton component for state shared by input and render systems.

    export_requested is a one-shot flag: the drag system raises it when the
    save control is clicked and the render system clears it after writing.
    pointer is the last known cursor position (top-left origin).
    """
    export_requested: bool = False
    pointer_x: int = 0
    pointer_y: int = 0
