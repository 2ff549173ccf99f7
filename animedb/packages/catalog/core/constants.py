"""常量定义：集中维护状态码与固定提示文案。"""

HTTP_STATUS_OK = 200
HTTP_STATUS_FORBIDDEN = 403
HTTP_STATUS_NOT_FOUND = 404
HTTP_STATUS_UNPROCESSABLE_ENTITY = 422

ACCESS_DENIED_MESSAGE = "You are not allowed to access this application."
PATH_REQUIRED_MESSAGE = "Path is required to fill for current type of storage"

STORAGE_NOT_FOUND_MESSAGE = "Storage not found"
ITEM_NOT_FOUND_MESSAGE = "Item not found"

STORAGE_NAME_MAX_LENGTH = 128
ITEM_NAME_MAX_LENGTH = 256

# ASGI scope 中标记“应用内部发起的子请求”的键，客户端无法通过请求头伪造
SUB_REQUEST_SCOPE_KEY = "animedb.sub_request"
