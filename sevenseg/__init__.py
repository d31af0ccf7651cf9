"""Driver logic for multiplexed 7-segment LED displays: pattern lookup and display control."""

__version__ = "0.1.0"
__all__ = ["display", "segments"]