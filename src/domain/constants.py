"""
Domain Constants: 플레이그라운드 전역 상수.

요청 크기 제한, 기본 파일명, 라우트 경로 등.
default.yaml로 덮어쓸 수 있는 값은 DEFAULT_ 접두사.
"""

# =============================================================================
# File Set (멀티 파일 템플릿)
# =============================================================================
# 구분자 라인 형식: "--- <name>\n"
# name 패턴: [\w/]+\.\w+  (예: main.template, ui/button.template)

DEFAULT_TEMPLATE_NAME = "main.template"
FILE_DELIMITER_PREFIX = "--- "

# =============================================================================
# Size Limits (크기 제한)
# =============================================================================
# source: 서버가 강제 (>= 2048 → 거절)
# data: 클라이언트만 검사 (서버는 강제하지 않음)

DEFAULT_MAX_SOURCE_LENGTH = 2048
DEFAULT_MAX_DATA_LENGTH = 512

# =============================================================================
# Disassembler
# =============================================================================

DEFAULT_DISASM_MAX_WIDTH = 24

# =============================================================================
# Routing
# =============================================================================

DEFAULT_MOUNT_PREFIX = "/ktemplate"
API_PREFIX = "/api"
INDEX_ROUTE = "/index.html"

ROUTE_RENDER = "/api/render"
ROUTE_DISASM = "/api/disasm"
ROUTE_INFO = "/api/info"

# =============================================================================
# Messages (사용자 노출 메시지)
# =============================================================================

MSG_SOURCE_TOO_BIG = "template source is too big"
MSG_DATA_TOO_BIG = "template data is too big"
MSG_UNKNOWN_ROUTE = "unknown route"
MSG_UNSUPPORTED_METHOD = "unsupported request method: {method}"
MSG_UNEXPECTED_RESPONSE = "unexpected response from the server"

# =============================================================================
# MIME Types
# =============================================================================

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
