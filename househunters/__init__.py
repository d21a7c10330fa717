"""
House Hunters
가중치 기반 매물 비교 및 엑셀 내보내기/가져오기
"""

__version__ = "0.1.0"
