"""
渠道配置与输水决策
==================

- close_all_canals: 每小时开始前清零所有渠道
- schedule_transfer: 把每小时输水量换算为渠道开度
- evaluate_transfer: 计算单条路线的安全输水量

只写渠道，不修改区域水量；实际输水由仿真引擎完成。
"""

import numpy as np
from typing import Iterable, Optional

from ..config.settings import BalancerConfig
from ..core.constants import FLOW_RATE_TO_VOLUME, MAX_FLOW_RATE
from ..network.canal import Canal
from ..network.region import Region
from .quantities import compute_safe_surplus, compute_deficit, compute_headroom


_DEFAULT = BalancerConfig()


def close_all_canals(canals: Iterable[Canal]):
    """关闭所有渠道并把开度清零"""
    for c in canals:
        c.set_flow_rate(0.0)
        c.toggle_open(False)


def schedule_transfer(canal: Optional[Canal], amount: float) -> float:
    """
    配置渠道在一小时内输送 amount 水量

    开度 = amount / 3.6，超过全开时限幅，限幅后实际输水量小于计划值。

    Parameters:
        canal: 渠道
        amount: 计划输水量

    Returns:
        实际设置的开度 (未配置时为 0)
    """
    if canal is None or amount <= 0.0:
        return 0.0

    flow_rate = float(np.minimum(amount / FLOW_RATE_TO_VOLUME, MAX_FLOW_RATE))
    if flow_rate <= 0.0:
        return 0.0

    canal.set_flow_rate(flow_rate)
    canal.toggle_open(True)
    return flow_rate


def plan_transfer_amount(source: Optional[Region], destination: Optional[Region],
                         config: Optional[BalancerConfig] = None) -> float:
    """
    计算单条路线的计划输水量

    min(受水区缺水量, 供水区可调出量, 受水区剩余库容 * 0.8)

    Returns:
        计划输水量，无需或无法输水时为 0
    """
    if source is None or destination is None:
        return 0.0

    cfg = config or _DEFAULT

    need = compute_deficit(destination)
    surplus = compute_safe_surplus(source, cfg)
    if need <= 0.0 or surplus <= 0.0:
        return 0.0

    # 防洪: 只利用部分剩余库容
    headroom = compute_headroom(destination)
    if headroom <= 0.0:
        return 0.0

    amount = min(need, surplus, headroom * cfg.flood_margin_ratio)
    if amount <= 0.0:
        return 0.0
    return amount


def evaluate_transfer(source: Optional[Region], destination: Optional[Region],
                      canal: Optional[Canal],
                      config: Optional[BalancerConfig] = None) -> float:
    """
    评估并下发单条路线的输水

    Parameters:
        source: 供水区域
        destination: 受水区域
        canal: 连接两区域的渠道
        config: 安全系数

    Returns:
        计划输水量 (未下发时为 0)
    """
    if source is None or destination is None or canal is None:
        return 0.0

    amount = plan_transfer_amount(source, destination, config)
    if amount <= 0.0:
        return 0.0

    schedule_transfer(canal, amount)
    return amount


__all__ = [
    'close_all_canals',
    'schedule_transfer',
    'plan_transfer_amount',
    'evaluate_transfer'
]
