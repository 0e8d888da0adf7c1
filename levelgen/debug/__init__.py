from .overlays import DebugOverlays
