"""
App layer: API 서버 (FastAPI).

역할:
- providers/ → 한국관광공사 KorService2 클라이언트 (재시도, 정규화)
- services/ → 통계 집계 (병렬 호출)
- routes/ → 프록시/통계 API
- config.py → default.yaml + 환경변수 → TourApiConfig
"""
