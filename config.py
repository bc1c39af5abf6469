import os

# ======= Logging =======
LOG_LEVEL = os.getenv("CP_LOG_LEVEL", "INFO").upper()
LOG_FILE  = os.getenv("CP_LOG_FILE", "")

# ======= Viewer =======
CELL_SIZE   = int(os.getenv("CP_CELL_SIZE", "64"))
FPS         = int(os.getenv("CP_FPS", "60"))
PIECE_DELAY = float(os.getenv("CP_PIECE_DELAY", "0.15"))

# ======= Output =======
# Empty means stdout.
SOLUTIONS_OUT = os.getenv("CP_SOLUTIONS_OUT", "")


class CFG:
    LOG_LEVEL = LOG_LEVEL
    LOG_FILE  = LOG_FILE

    CELL_SIZE   = CELL_SIZE
    FPS         = FPS
    PIECE_DELAY = PIECE_DELAY

    SOLUTIONS_OUT = SOLUTIONS_OUT


__all__ = ["CFG"]
