from enum import Enum, auto

class UIState(Enum):
    MENU = auto()
    DATE_PICKER = auto()
    SOLUTIONS = auto()
    INTRO = auto()

class AppState:
    def __init__(self):
        self.current_state = UIState.MENU
        self.selected_date = None  # (month, day)
        # Placement table, built on the first solve and reused afterwards
        self.placements = None
