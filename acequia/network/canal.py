"""
渠道模型
========

有向、限速输水渠道:
- 开度限幅 [0, 1]
- 启闭状态
- 逐秒积分输水 (仿真引擎调用)
"""

import numpy as np
from dataclasses import dataclass
from typing import Dict, Optional

from ..core.constants import (
    SECONDS_PER_HOUR, FLOW_ACCUMULATOR_SCALE, MIN_FLOW_RATE, MAX_FLOW_RATE
)
from .region import Region


@dataclass
class CanalState:
    """渠道状态快照"""
    name: str
    flow_rate: float
    is_open: bool
    last_transfer: float


class Canal:
    """
    输水渠道

    调度器每小时先清零再写入 flow_rate / is_open；
    实际输水由 update_water 在仿真步进时完成。
    """

    def __init__(self, name: str, source: Optional[str] = None,
                 destination: Optional[str] = None):
        self.name = name
        self.source = source
        self.destination = destination

        self.flow_rate = 0.0
        self.is_open = False

        # 上一小时实际输水量
        self.last_transfer = 0.0

    def __repr__(self) -> str:
        return (f"Canal({self.name!r}, {self.source}->{self.destination}, "
                f"rate={self.flow_rate:.3f}, open={self.is_open})")

    def set_flow_rate(self, flow_rate: float):
        """设置开度 (限幅到 [0, 1])"""
        self.flow_rate = float(np.clip(flow_rate, MIN_FLOW_RATE, MAX_FLOW_RATE))

    def toggle_open(self, is_open: bool):
        self.is_open = bool(is_open)

    def update_water(self, regions: Dict[str, Region],
                     seconds: int = SECONDS_PER_HOUR) -> float:
        """
        积分一小时输水

        每秒累加 flow_rate，结束后除以 FLOW_ACCUMULATOR_SCALE 得到输水量，
        受供水区域现有水量限制。

        Parameters:
            regions: 区域名称 -> 区域
            seconds: 积分秒数

        Returns:
            实际输水量
        """
        self.last_transfer = 0.0
        if not self.is_open or self.flow_rate <= 0.0:
            return 0.0

        src = regions.get(self.source)
        dst = regions.get(self.destination)
        if src is None or dst is None:
            return 0.0

        change = 0.0
        for _ in range(seconds):
            change += self.flow_rate

        moved = src.remove_water(change / FLOW_ACCUMULATOR_SCALE)
        dst.add_water(moved)
        self.last_transfer = moved
        return moved

    def get_state(self) -> CanalState:
        return CanalState(
            name=self.name,
            flow_rate=self.flow_rate,
            is_open=self.is_open,
            last_transfer=self.last_transfer
        )
