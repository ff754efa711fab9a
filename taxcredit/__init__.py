"""조특법 세액공제 자동 판정 시스템"""

__version__ = "0.1.0"
