"""
区域模型
========

蓄水区域 (节点):
- 当前水量、需水量、库容
- 洪涝/干旱标志
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import List

from ..core.base_config import ConfigValidator, ValidationResult


class RegionStatus(Enum):
    """区域状态"""
    NORMAL = auto()       # 正常
    FLOODED = auto()      # 洪涝 (超过库容)
    DROUGHT = auto()      # 干旱 (低于需水量)


@dataclass
class RegionState:
    """区域状态快照"""
    name: str
    water_level: float
    water_need: float
    water_capacity: float
    status: RegionStatus


class Region:
    """
    蓄水区域

    调度器只读取 water_level / water_need / water_capacity，
    标志位由仿真引擎在每小时结束时更新。
    """

    def __init__(self, name: str, water_level: float = 0.0,
                 water_need: float = 0.0, water_capacity: float = 0.0):
        self.name = name
        self.water_level = float(water_level)
        self.water_need = float(water_need)
        self.water_capacity = float(water_capacity)

        self.is_flooded = False
        self.is_in_drought = False

    def __repr__(self) -> str:
        return (f"Region({self.name!r}, level={self.water_level:.3f}, "
                f"need={self.water_need:.3f}, capacity={self.water_capacity:.3f})")

    @property
    def status(self) -> RegionStatus:
        if self.is_flooded:
            return RegionStatus.FLOODED
        if self.is_in_drought:
            return RegionStatus.DROUGHT
        return RegionStatus.NORMAL

    def update_flags(self):
        """根据当前水量更新洪涝/干旱标志"""
        self.is_flooded = self.water_level > self.water_capacity
        self.is_in_drought = self.water_level < self.water_need

    def add_water(self, amount: float):
        self.water_level += amount

    def remove_water(self, amount: float) -> float:
        """取水，不会取到负值。返回实际取出量"""
        taken = min(amount, self.water_level)
        self.water_level -= taken
        return taken

    def validate(self) -> List[ValidationResult]:
        """验证区域参数"""
        results = [
            ConfigValidator.validate_non_negative(self.water_level, f"{self.name}.water_level"),
            ConfigValidator.validate_non_negative(self.water_need, f"{self.name}.water_need"),
            ConfigValidator.validate_non_negative(self.water_capacity, f"{self.name}.water_capacity"),
        ]
        return [r for r in results if not r.is_valid]

    def get_state(self) -> RegionState:
        return RegionState(
            name=self.name,
            water_level=self.water_level,
            water_need=self.water_need,
            water_capacity=self.water_capacity,
            status=self.status
        )
