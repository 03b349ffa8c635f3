"""
Bunny SDK 常量配置模块

定义客户端使用的常量、默认地址、认证头名称等
"""

# HTTP 方法常量
HTTP_METHOD_GET = "GET"
HTTP_METHOD_POST = "POST"
HTTP_METHOD_PUT = "PUT"
HTTP_METHOD_DELETE = "DELETE"
HTTP_METHOD_PATCH = "PATCH"

# HTTP 状态码
HTTP_STATUS_NO_CONTENT = 204
HTTP_STATUS_UNAUTHORIZED = 401
HTTP_STATUS_FORBIDDEN = 403
HTTP_STATUS_NOT_FOUND = 404
HTTP_STATUS_TOO_MANY_REQUESTS = 429
HTTP_STATUS_ERROR_THRESHOLD = 400  # 大于等于该值的状态码视为错误响应
HTTP_STATUS_SERVER_ERROR = 500

# 默认配置
DEFAULT_TIMEOUT = 30  # 默认超时时间（秒），仅透传给底层传输
DEFAULT_USER_AGENT = "bunny-sdk-python/1.0"

# 各 API 区域的默认基础地址
DEFAULT_API_BASE_URL = "https://api.bunny.net"
DEFAULT_STREAM_BASE_URL = "https://video.bunnycdn.com"
DEFAULT_CONTAINERS_BASE_URL = "https://api.bunny.net/mc"
DEFAULT_STORAGE_FILE_BASE_URL = "https://storage.bunnycdn.com"

# 认证与内容协商
HEADER_ACCESS_KEY = "AccessKey"
HEADER_USER_AGENT = "User-Agent"
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CHECKSUM = "Checksum"
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_OCTET_STREAM = "application/octet-stream"

# 错误信息前缀（按 API 区域区分）
ERROR_PREFIX_DEFAULT = "bunny"
ERROR_PREFIX_STORAGE = "bunny storage"
ERROR_PREFIX_STREAM = "bunny stream"
ERROR_PREFIX_SCRIPTING = "bunny scripting"
ERROR_PREFIX_CONTAINERS = "bunny containers"
ERROR_PREFIX_SHIELD = "bunny shield"

# 列表默认分页
DEFAULT_PAGE = 1
DEFAULT_ITEMS_PER_PAGE = 100

# 连接池配置
POOL_CONNECTIONS = 10  # 连接池大小
POOL_MAXSIZE = 10  # 连接池最大连接数

DEFAULT_POOL_CONFIG = {
    "pool_connections": POOL_CONNECTIONS,  # 连接池大小
    "pool_maxsize": POOL_MAXSIZE,  # 连接池最大连接数
    "max_retries": 0,  # 不做任何重试
}

# 文件下载配置
DEFAULT_CHUNK_SIZE = 8192  # 默认分块大小（字节）
