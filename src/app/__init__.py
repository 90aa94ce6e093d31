"""
App layer: 플레이그라운드 서버 (FastAPI).

역할:
- HTTP 요청 → RouteDispatcher → PlaygroundService
- 플레이그라운드 페이지 + 정적 파일 제공

주의: 폴더 구분
- src/app/templates/ → 페이지용 Jinja2 HTML
- src/render/ → 사용자 템플릿을 처리하는 엔진 어댑터
"""
