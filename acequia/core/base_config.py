"""
配置验证框架 (Configuration Validation)
=======================================

提供场景数据与网络拓扑的通用验证规则。
验证结果以 ValidationResult 列表返回，由调用方决定是告警还是拒绝。
"""

from dataclasses import dataclass
from typing import List, Optional, Iterable
from enum import Enum, auto


class ValidationSeverity(Enum):
    """验证结果严重程度"""
    INFO = auto()       # 信息
    WARNING = auto()    # 警告
    ERROR = auto()      # 错误
    CRITICAL = auto()   # 严重错误


@dataclass
class ValidationResult:
    """配置验证结果"""
    is_valid: bool                              # 是否通过验证
    severity: ValidationSeverity                # 严重程度
    message: str                                # 消息
    field_name: Optional[str] = None            # 相关字段名
    suggestion: Optional[str] = None            # 修复建议


class ConfigValidator:
    """
    配置验证器

    提供通用的配置验证规则
    """

    @staticmethod
    def validate_non_negative(value: float, name: str) -> ValidationResult:
        """验证非负数"""
        if value < 0:
            return ValidationResult(
                is_valid=False,
                severity=ValidationSeverity.ERROR,
                message=f"{name} 不能为负数，当前值: {value}",
                field_name=name,
                suggestion=f"将 {name} 设置为大于等于0的值"
            )
        return ValidationResult(is_valid=True, severity=ValidationSeverity.INFO, message="OK")

    @staticmethod
    def validate_unique(names: Iterable[str], name: str) -> ValidationResult:
        """验证名称唯一"""
        seen = set()
        duplicates = []
        for n in names:
            if n in seen and n not in duplicates:
                duplicates.append(n)
            seen.add(n)

        if duplicates:
            return ValidationResult(
                is_valid=False,
                severity=ValidationSeverity.ERROR,
                message=f"{name} 存在重复名称: {', '.join(duplicates)}",
                field_name=name,
                suggestion=f"为每个 {name} 使用唯一名称"
            )
        return ValidationResult(is_valid=True, severity=ValidationSeverity.INFO, message="OK")

    @staticmethod
    def validate_member(value: str, members: Iterable[str], name: str) -> ValidationResult:
        """验证取值属于已知集合"""
        members = list(members)
        if value not in members:
            return ValidationResult(
                is_valid=False,
                severity=ValidationSeverity.ERROR,
                message=f"{name} 引用了未知对象: {value}",
                field_name=name,
                suggestion=f"可选值: {', '.join(members)}"
            )
        return ValidationResult(is_valid=True, severity=ValidationSeverity.INFO, message="OK")


def collect_errors(results: List[ValidationResult]) -> List[ValidationResult]:
    """筛选出错误及以上级别的验证结果"""
    return [
        r for r in results
        if not r.is_valid and r.severity in (ValidationSeverity.ERROR, ValidationSeverity.CRITICAL)
    ]


def format_report(results: List[ValidationResult]) -> str:
    """生成验证报告"""
    failed = [r for r in results if not r.is_valid]
    if not failed:
        return "配置验证通过 ✓"

    lines = ["配置验证报告:", "=" * 40]
    for r in failed:
        icon = {"ERROR": "❌", "WARNING": "⚠️", "INFO": "ℹ️", "CRITICAL": "🚨"}.get(
            r.severity.name, "•"
        )
        lines.append(f"{icon} [{r.severity.name}] {r.message}")
        if r.suggestion:
            lines.append(f"   建议: {r.suggestion}")
    return "\n".join(lines)


__all__ = [
    'ValidationSeverity',
    'ValidationResult',
    'ConfigValidator',
    'collect_errors',
    'format_report'
]
