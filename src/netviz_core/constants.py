# src/netviz_core/constants.py
# --- Schematic Pin Layout ---

#: Distance in canvas pixels between two adjacent pins on the same row/column.
PIN_SPACING: float = 36.0

#: Horizontal distance from an IC body centre to its left/right pin columns.
IC_PIN_COLUMN_OFFSET: float = 60.0

#: IC pin columns are compressed vertically by this factor.
IC_PIN_ROW_SCALE: float = 0.5

#: Non-IC pin strips are compressed horizontally by this factor.
STRIP_PIN_SCALE: float = 0.8

#: Vertical distance from a non-IC body centre to its pin strip.
STRIP_PIN_Y_OFFSET: float = 30.0

# --- Design Rules ---

#: Component types (lowercased) that are not required to connect to ground.
#: Kept exactly as the long-standing heuristic; inductors are deliberately not listed.
GROUND_EXEMPT_COMPONENT_TYPES = frozenset({"resistor", "connector", "led", "capacitor"})

#: Minimum number of pin connections for a net to be meaningful.
MIN_NET_CONNECTIONS: int = 2

# --- Circuit Analysis ---

#: Linear weights of the relative complexity score.
COMPONENT_COMPLEXITY_WEIGHT: float = 2.0
NET_COMPLEXITY_WEIGHT: float = 1.5
CONNECTION_COMPLEXITY_WEIGHT: float = 0.5

# --- Error Highlighting ---

ERROR_HIGHLIGHT_COLOR: str = "#ff4444"
WARNING_HIGHLIGHT_COLOR: str = "#ffaa44"

