"""Wire text conversion services"""

from .header_line import HeaderLine

__all__ = ["HeaderLine"]
