"""
调度控制模块
============

- quantities: 可调出量 / 缺水量 / 剩余库容
- transfer: 渠道清零、开度换算、单路线决策
- balancer: 逐时调度循环
"""

from .quantities import (
    minimum_retained_level,
    compute_safe_surplus,
    compute_deficit,
    compute_headroom
)
from .transfer import (
    close_all_canals,
    schedule_transfer,
    plan_transfer_amount,
    evaluate_transfer
)
from .balancer import (
    INFEASIBLE_MESSAGE,
    FeasibilityReport,
    check_feasibility,
    HourlyBalancer,
    solve_problems
)

__all__ = [
    'minimum_retained_level',
    'compute_safe_surplus',
    'compute_deficit',
    'compute_headroom',
    'close_all_canals',
    'schedule_transfer',
    'plan_transfer_amount',
    'evaluate_transfer',
    'INFEASIBLE_MESSAGE',
    'FeasibilityReport',
    'check_feasibility',
    'HourlyBalancer',
    'solve_problems'
]
