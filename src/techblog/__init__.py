"""
Techblog 데이터 접근 레이어

Article / Writer / Tag 영속화 및 조회
"""
