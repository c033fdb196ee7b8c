"""
REST API客户端基类

提供通用的HTTP请求功能，包括：
- 复用的 httpx.AsyncClient（按需创建，close()/async with 关闭）
- 请求/响应日志（api_key 脱敏）
- 超时控制

不做重试：传输层异常（httpx.TimeoutException、httpx.NetworkError 等）原样抛给调用方。
"""
from typing import Any, Dict, Optional
from dataclasses import dataclass
from datetime import datetime

import httpx

from core.logging_config import get_logger, mask_secrets

logger = get_logger(__name__)


@dataclass
class APIResponse:
    """API响应封装"""
    status_code: int
    raw_content: bytes
    elapsed_ms: float
    request_id: Optional[str] = None


class BaseAPIClient:
    """
    REST API客户端基类

    子类继承并实现具体的API调用
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        debug: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        初始化API客户端

        Args:
            base_url: API基础URL
            timeout: 请求超时时间（秒）
            headers: 默认请求头
            debug: 是否开启调试模式
            transport: 自定义 httpx 传输层（测试时注入 httpx.MockTransport）
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.debug = debug
        self._transport = transport

        self.default_headers = {
            "Accept": "application/xml, text/xml",
            "User-Agent": "catapi-client/1.0",
        }
        if headers:
            self.default_headers.update(headers)

        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        """获取或创建HTTP客户端"""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """关闭HTTP客户端"""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _build_url(self, endpoint: str) -> str:
        """构建完整URL"""
        endpoint = endpoint.lstrip('/')
        return f"{self.base_url}/{endpoint}"

    def _log_request(self, method: str, url: str, params: Optional[Dict[str, Any]]):
        if self.debug:
            logger.debug("api_request", method=method, url=url, params=mask_secrets(params or {}))

    def _log_response(self, response: APIResponse):
        if self.debug:
            logger.debug(
                "api_response",
                status_code=response.status_code,
                elapsed_ms=round(response.elapsed_ms, 2),
                request_id=response.request_id,
            )

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> APIResponse:
        """
        发送GET请求

        Args:
            endpoint: API端点
            params: 查询参数（按插入顺序拼接）

        Returns:
            APIResponse: API响应
        """
        url = self._build_url(endpoint)
        self._log_request("GET", url, params)

        start_time = datetime.now()
        response = await self.client.get(url, params=params, headers=self.default_headers)
        elapsed = (datetime.now() - start_time).total_seconds() * 1000

        api_response = APIResponse(
            status_code=response.status_code,
            raw_content=response.content,
            elapsed_ms=elapsed,
            request_id=response.headers.get("x-request-id"),
        )
        self._log_response(api_response)
        return api_response
