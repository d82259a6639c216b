from selection_state import SelectionStateMachine


class AppState:
    """Single holder for everything the loop touches: grid, sizes, mode and selection."""

    def __init__(self, grid, sizes, machine=None):
        self.grid = grid
        self.sizes = sizes
        self.machine = machine if machine is not None else SelectionStateMachine()

    @property
    def mode(self):
        return self.machine.mode

    @property
    def selection(self):
        return self.machine.selection

    def apply(self, command) -> bool:
        return self.machine.apply(command)
