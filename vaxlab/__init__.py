"""Research, vaccine and employee records for a vaccine lab, with statistics, translations, RFID badge checks and HTML export."""

__version__ = "0.1.0"
__all__ = ["__version__"]