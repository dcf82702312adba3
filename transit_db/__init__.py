"""
Transit Catalogue DB - in-memory 버스 노선 / 정류장 데이터베이스
"""

__version__ = "1.0.0"
