"""访问防火墙：仅允许本机或局域网内的客户端访问应用。

判定规则：
- 请求带有 ``Client-IP`` 或 ``X-Forwarded-For`` 头部时一律拒绝（只看是否存在，不看取值），
  直连的局域网客户端不会设置这两个头部；
- 拿不到客户端地址时拒绝；
- ``127.0.0.1``、``fe80::1``、``::1`` 视为本机，直接放行（精确匹配）；
- IPv6 地址只拒绝以 ``fc00::`` 开头的地址，其余全部放行（与 IPv4 分支不对称，保持原样）；
- IPv4 地址只放行 RFC1918 三个私有网段，无法解析时拒绝。
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import Optional

from animedb.packages.catalog.core.constants import ACCESS_DENIED_MESSAGE, HTTP_STATUS_FORBIDDEN

LOCAL_HOST_ADDRESSES = frozenset({"127.0.0.1", "fe80::1", "::1"})

PRIVATE_IPV6_PREFIX = "fc00::"

# 闭区间 [start, end]
PRIVATE_IPV4_RANGES = (
    (int(ipaddress.IPv4Address("10.0.0.0")), int(ipaddress.IPv4Address("10.255.255.255"))),
    (int(ipaddress.IPv4Address("172.16.0.0")), int(ipaddress.IPv4Address("172.31.255.255"))),
    (int(ipaddress.IPv4Address("192.168.0.0")), int(ipaddress.IPv4Address("192.168.255.255"))),
)


@dataclass(frozen=True)
class AccessDecision:
    """一次请求的放行/拒绝结论；拒绝时附带固定提示与 403 状态码。"""

    allowed: bool
    message: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def allow(cls) -> "AccessDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls) -> "AccessDecision":
        return cls(allowed=False, message=ACCESS_DENIED_MESSAGE, status_code=HTTP_STATUS_FORBIDDEN)


def is_local_host(addr: str) -> bool:
    return addr in LOCAL_HOST_ADDRESSES


def _ipv4_to_int(addr: str) -> Optional[int]:
    try:
        return int(ipaddress.IPv4Address(addr))
    except ValueError:
        return None


def is_local_network(addr: str) -> bool:
    if ":" in addr:
        return not addr.startswith(PRIVATE_IPV6_PREFIX)

    value = _ipv4_to_int(addr)
    if value is None:
        return False
    return any(start <= value <= end for start, end in PRIVATE_IPV4_RANGES)


def evaluate(
    client_addr: Optional[str],
    has_client_ip_header: bool,
    has_forwarded_for_header: bool,
) -> AccessDecision:
    """判定客户端是否允许访问应用。"""
    if has_client_ip_header or has_forwarded_for_header:
        return AccessDecision.deny()
    if not client_addr:
        return AccessDecision.deny()
    if is_local_host(client_addr) or is_local_network(client_addr):
        return AccessDecision.allow()
    return AccessDecision.deny()
