"""
House Hunters 세션 패키지
"""

from .session import HouseHuntSession

__all__ = ["HouseHuntSession"]
