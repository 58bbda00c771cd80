"""
调度水量计算
============

- 安全可调出水量 (safe surplus)
- 缺水量 (deficit)
- 剩余库容 (headroom)

区域缺失 (None) 时一律返回 0。
"""

from typing import Optional

from ..config.settings import BalancerConfig
from ..network.region import Region


_DEFAULT = BalancerConfig()


def minimum_retained_level(region: Region, config: Optional[BalancerConfig] = None) -> float:
    """保底水位: max(需水量保底, 库容保底)"""
    cfg = config or _DEFAULT
    by_need = cfg.need_floor_ratio * region.water_need
    by_capacity = cfg.capacity_floor_ratio * region.water_capacity
    return max(by_need, by_capacity)


def compute_safe_surplus(region: Optional[Region],
                         config: Optional[BalancerConfig] = None) -> float:
    """
    计算区域本小时可安全调出的水量

    水位不低于保底水位，也不低于自身需水量。

    Parameters:
        region: 区域
        config: 安全系数

    Returns:
        可调出水量 (>= 0)
    """
    if region is None:
        return 0.0

    min_level = minimum_retained_level(region, config)
    if region.water_level <= min_level:
        return 0.0

    keep_level = max(min_level, region.water_need)
    if region.water_level <= keep_level:
        return 0.0

    return region.water_level - keep_level


def compute_deficit(region: Optional[Region]) -> float:
    """缺水量: max(0, 需水量 - 当前水量)"""
    if region is None:
        return 0.0
    if region.water_level >= region.water_need:
        return 0.0
    return region.water_need - region.water_level


def compute_headroom(region: Optional[Region]) -> float:
    """剩余库容: 库容 - 当前水量 (可为负，表示已超库容)"""
    if region is None:
        return 0.0
    return region.water_capacity - region.water_level


__all__ = [
    'minimum_retained_level',
    'compute_safe_surplus',
    'compute_deficit',
    'compute_headroom'
]
