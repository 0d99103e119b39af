"""Application error codes, their messages and suggestions, and AppError."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Numeric error codes shared by the management services."""

    SUCCESS = 0

    NODE_NOT_FOUND = 1001
    NODE_ALREADY_EXISTS = 1002
    NODE_CONNECTION_FAIL = 1003
    NODE_INVALID_CONFIG = 1004

    CONTAINER_NOT_FOUND = 2001
    CONTAINER_ALREADY_EXISTS = 2002
    CONTAINER_RUNNING = 2003
    CONTAINER_STOPPED = 2004
    CONTAINER_NOT_RUNNING = 2005
    CONTAINER_STATUS_UNKNOWN = 2006
    CONTAINER_CONFIG_INVALID = 2007

    NAT_RULE_NOT_FOUND = 3001
    NAT_RULE_ADD_FAIL = 3002
    NAT_RULE_DELETE_FAIL = 3003
    NAT_PORT_IN_USE = 3004
    NAT_QUERY_FAIL = 3005

    DB_QUERY_FAIL = 4001
    DB_INSERT_FAIL = 4002
    DB_UPDATE_FAIL = 4003
    DB_DELETE_FAIL = 4004
    DB_TRANSACTION_FAIL = 4005
    DB_RECORD_NOT_FOUND = 4006
    DB_DUPLICATE_ENTRY = 4007

    AUTH_FAILED = 5001
    AUTH_INVALID_TOKEN = 5002
    AUTH_EXPIRED = 5003
    AUTH_NO_PERMISSION = 5004
    AUTH_INVALID_CAPTCHA = 5005

    SYNC_FAILED = 6001
    SYNC_IN_PROGRESS = 6002
    SYNC_TIMEOUT = 6003

    CONFIG_LOAD_FAIL = 7001
    CONFIG_SAVE_FAIL = 7002
    CONFIG_INVALID = 7003

    SYSTEM_COMMAND_FAIL = 8001
    SYSTEM_NETWORK_FAIL = 8002
    SYSTEM_DISK_FULL = 8003
    SYSTEM_PERMISSION = 8004
    SYSTEM_TIMEOUT = 8005
    SYSTEM_UNKNOWN = 8006


_MESSAGES: dict[int, str] = {
    ErrorCode.SUCCESS: "Success",
    ErrorCode.NODE_NOT_FOUND: "Node not found",
    ErrorCode.NODE_ALREADY_EXISTS: "Node already exists",
    ErrorCode.NODE_CONNECTION_FAIL: "Node connection failed",
    ErrorCode.NODE_INVALID_CONFIG: "Node configuration invalid",
    ErrorCode.CONTAINER_NOT_FOUND: "Container not found",
    ErrorCode.CONTAINER_ALREADY_EXISTS: "Container already exists",
    ErrorCode.CONTAINER_RUNNING: "Container is running",
    ErrorCode.CONTAINER_STOPPED: "Container is stopped",
    ErrorCode.CONTAINER_NOT_RUNNING: "Container is not running",
    ErrorCode.CONTAINER_STATUS_UNKNOWN: "Container status unknown",
    ErrorCode.CONTAINER_CONFIG_INVALID: "Container configuration invalid",
    ErrorCode.NAT_RULE_NOT_FOUND: "NAT rule not found",
    ErrorCode.NAT_RULE_ADD_FAIL: "NAT rule add failed",
    ErrorCode.NAT_RULE_DELETE_FAIL: "NAT rule delete failed",
    ErrorCode.NAT_PORT_IN_USE: "NAT port already in use",
    ErrorCode.NAT_QUERY_FAIL: "NAT query failed",
    ErrorCode.DB_QUERY_FAIL: "Database query failed",
    ErrorCode.DB_INSERT_FAIL: "Database insert failed",
    ErrorCode.DB_UPDATE_FAIL: "Database update failed",
    ErrorCode.DB_DELETE_FAIL: "Database delete failed",
    ErrorCode.DB_TRANSACTION_FAIL: "Database transaction failed",
    ErrorCode.DB_RECORD_NOT_FOUND: "Database record not found",
    ErrorCode.DB_DUPLICATE_ENTRY: "Database duplicate entry",
    ErrorCode.AUTH_FAILED: "Authentication failed",
    ErrorCode.AUTH_INVALID_TOKEN: "Invalid token",
    ErrorCode.AUTH_EXPIRED: "Token expired",
    ErrorCode.AUTH_NO_PERMISSION: "No permission",
    ErrorCode.AUTH_INVALID_CAPTCHA: "Invalid captcha",
    ErrorCode.SYNC_FAILED: "Sync failed",
    ErrorCode.SYNC_IN_PROGRESS: "Sync already in progress",
    ErrorCode.SYNC_TIMEOUT: "Sync timeout",
    ErrorCode.CONFIG_LOAD_FAIL: "Config load failed",
    ErrorCode.CONFIG_SAVE_FAIL: "Config save failed",
    ErrorCode.CONFIG_INVALID: "Config invalid",
    ErrorCode.SYSTEM_COMMAND_FAIL: "System command failed",
    ErrorCode.SYSTEM_NETWORK_FAIL: "System network failed",
    ErrorCode.SYSTEM_DISK_FULL: "System disk full",
    ErrorCode.SYSTEM_PERMISSION: "System permission denied",
    ErrorCode.SYSTEM_TIMEOUT: "System timeout",
    ErrorCode.SYSTEM_UNKNOWN: "Unknown system error",
}

_SUGGESTIONS: dict[int, str] = {
    ErrorCode.SUCCESS: "",
    ErrorCode.NODE_NOT_FOUND: "请检查节点 ID 是否正确",
    ErrorCode.NODE_ALREADY_EXISTS: "节点名称已存在，请使用其他名称",
    ErrorCode.NODE_CONNECTION_FAIL: "请检查节点地址和 API Key 是否正确",
    ErrorCode.NODE_INVALID_CONFIG: "请检查节点配置参数是否完整",
    ErrorCode.CONTAINER_NOT_FOUND: "请检查容器名称是否正确",
    ErrorCode.CONTAINER_ALREADY_EXISTS: "容器名称已被使用，请使用其他名称",
    ErrorCode.CONTAINER_RUNNING: "请先停止容器再执行此操作",
    ErrorCode.CONTAINER_STOPPED: "请先启动容器",
    ErrorCode.CONTAINER_NOT_RUNNING: "容器未运行，请检查容器状态",
    ErrorCode.CONTAINER_STATUS_UNKNOWN: "请稍后重试，或联系管理员检查节点状态",
    ErrorCode.CONTAINER_CONFIG_INVALID: "请检查容器配置参数是否正确",
    ErrorCode.NAT_RULE_NOT_FOUND: "请检查端口号是否正确",
    ErrorCode.NAT_RULE_ADD_FAIL: "请检查端口是否已被占用",
    ErrorCode.NAT_RULE_DELETE_FAIL: "请重试，或手动删除规则",
    ErrorCode.NAT_PORT_IN_USE: "该端口已被其他容器使用，请选择其他端口",
    ErrorCode.NAT_QUERY_FAIL: "请检查数据库连接",
    ErrorCode.DB_QUERY_FAIL: "请检查数据库连接和查询语句",
    ErrorCode.DB_INSERT_FAIL: "请检查数据是否重复或字段是否完整",
    ErrorCode.DB_UPDATE_FAIL: "请检查记录是否存在",
    ErrorCode.DB_DELETE_FAIL: "请检查记录是否存在或是否被其他数据引用",
    ErrorCode.DB_TRANSACTION_FAIL: "请重试或联系管理员",
    ErrorCode.DB_RECORD_NOT_FOUND: "请检查查询条件是否正确",
    ErrorCode.DB_DUPLICATE_ENTRY: "该记录已存在",
    ErrorCode.AUTH_FAILED: "用户名或密码错误",
    ErrorCode.AUTH_INVALID_TOKEN: "请重新登录",
    ErrorCode.AUTH_EXPIRED: "登录已过期，请重新登录",
    ErrorCode.AUTH_NO_PERMISSION: "您没有权限执行此操作",
    ErrorCode.AUTH_INVALID_CAPTCHA: "验证码错误，请重新输入",
    ErrorCode.SYNC_FAILED: "同步失败，请检查节点连接",
    ErrorCode.SYNC_IN_PROGRESS: "节点正在同步中，请稍后再试",
    ErrorCode.SYNC_TIMEOUT: "同步超时，请检查网络连接",
    ErrorCode.CONFIG_LOAD_FAIL: "请检查配置文件是否存在和格式是否正确",
    ErrorCode.CONFIG_SAVE_FAIL: "请检查文件权限和磁盘空间",
    ErrorCode.CONFIG_INVALID: "请检查配置项是否完整和正确",
    ErrorCode.SYSTEM_COMMAND_FAIL: "请检查系统命令和权限",
    ErrorCode.SYSTEM_NETWORK_FAIL: "请检查网络连接",
    ErrorCode.SYSTEM_DISK_FULL: "磁盘空间不足，请清理磁盘或扩容",
    ErrorCode.SYSTEM_PERMISSION: "权限不足，请使用管理员权限执行",
    ErrorCode.SYSTEM_TIMEOUT: "操作超时，请检查系统负载",
    ErrorCode.SYSTEM_UNKNOWN: "未知错误，请查看系统日志或联系管理员",
}

_UNKNOWN_MESSAGE = "Unknown error"
_DEFAULT_SUGGESTION = "请查看系统日志获取更多信息，或联系管理员"


def get_error_message(code: int) -> str:
    """Return the English message for an error code."""
    return _MESSAGES.get(code, _UNKNOWN_MESSAGE)


def get_suggestion(code: int) -> str:
    """Return the user-facing suggestion for an error code."""
    return _SUGGESTIONS.get(code, _DEFAULT_SUGGESTION)


class AppError(Exception):
    """An error carrying a code, the failing function and optional context."""

    def __init__(
        self,
        func_name: str,
        code: int,
        message: str,
        cause: object | None = None,
    ) -> None:
        super().__init__(message)
        self.func_name = func_name
        self.code = code
        self.message = message
        self.cause = cause
        self.detail = str(cause) if cause is not None else ""
        self.suggestion = get_suggestion(code)
        self.trace_id = ""
        self.context: dict[str, Any] = {}
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    def __str__(self) -> str:
        code = int(self.code)
        if self.detail:
            return f"[{self.func_name}] {self.message}: {self.detail} (code: {code})"
        return f"[{self.func_name}] {self.message} (code: {code})"

    def with_context(self, key: str, value: Any) -> AppError:
        """Attach a context value and return the same error."""
        self.context[key] = value
        return self

    def with_trace_id(self, trace_id: str) -> AppError:
        """Set the trace id and return the same error."""
        self.trace_id = trace_id
        return self