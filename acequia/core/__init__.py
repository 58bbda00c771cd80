"""
通用核心框架 (Core Framework)
=============================

核心组件:
---------
1. constants - 渠道积分常数
2. base_config - 配置验证框架
3. base_scheduler - 调度器基类
"""

from .constants import (
    FlowConstants,
    SECONDS_PER_HOUR,
    FLOW_ACCUMULATOR_SCALE,
    FLOW_RATE_TO_VOLUME,
    MIN_FLOW_RATE,
    MAX_FLOW_RATE
)

from .base_config import (
    ValidationSeverity,
    ValidationResult,
    ConfigValidator,
    collect_errors,
    format_report
)

from .base_scheduler import (
    TransferCommand,
    ScheduleDecision,
    BaseScheduler
)

__all__ = [
    'FlowConstants',
    'SECONDS_PER_HOUR',
    'FLOW_ACCUMULATOR_SCALE',
    'FLOW_RATE_TO_VOLUME',
    'MIN_FLOW_RATE',
    'MAX_FLOW_RATE',
    'ValidationSeverity',
    'ValidationResult',
    'ConfigValidator',
    'collect_errors',
    'format_report',
    'TransferCommand',
    'ScheduleDecision',
    'BaseScheduler'
]
