"""
仿真记录
========

逐时记录区域水量、标志与渠道设置，并汇总为运行结果。
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any
import numpy as np

from ..network.region import RegionState, RegionStatus
from ..network.canal import CanalState


@dataclass
class TimeSeriesData:
    """时间序列数据"""
    name: str                                   # 变量名
    times: np.ndarray = field(default_factory=lambda: np.array([]))
    values: np.ndarray = field(default_factory=lambda: np.array([]))

    def append(self, t: float, v: float):
        """追加数据点"""
        self.times = np.append(self.times, t)
        self.values = np.append(self.values, v)

    def get_statistics(self) -> Dict[str, float]:
        """获取统计信息"""
        if len(self.values) == 0:
            return {"min": 0, "max": 0, "mean": 0, "std": 0}
        return {
            "min": float(np.min(self.values)),
            "max": float(np.max(self.values)),
            "mean": float(np.mean(self.values)),
            "std": float(np.std(self.values))
        }


@dataclass
class HourRecord:
    """一小时结束时的仿真快照"""
    hour: int
    regions: List[RegionState]
    canals: List[CanalState]
    penalties: int
    is_solved: bool

    @property
    def flagged(self) -> List[str]:
        return [r.name for r in self.regions if r.status != RegionStatus.NORMAL]


@dataclass
class RunResult:
    """仿真运行结果"""
    scenario: str
    hours: int
    is_solved: bool
    penalties: int
    records: List[HourRecord] = field(default_factory=list)
    time_series: Dict[str, TimeSeriesData] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def from_records(cls, scenario: str, records: List[HourRecord],
                     hours: int, is_solved: bool, penalties: int) -> 'RunResult':
        result = cls(scenario=scenario, hours=hours, is_solved=is_solved,
                     penalties=penalties, records=list(records))
        for rec in records:
            for state in rec.regions:
                key = f"{state.name}_level"
                if key not in result.time_series:
                    result.time_series[key] = TimeSeriesData(name=key)
                result.time_series[key].append(rec.hour, state.water_level)
        return result

    def get_series(self, name: str) -> Optional[TimeSeriesData]:
        """获取时间序列"""
        return self.time_series.get(name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'scenario': self.scenario,
            'hours': self.hours,
            'is_solved': self.is_solved,
            'penalties': self.penalties,
            'levels': {
                name: ts.get_statistics() for name, ts in self.time_series.items()
            },
            'warnings': list(self.warnings)
        }

    def summary(self) -> str:
        """生成摘要"""
        lines = [
            f"仿真结果摘要 - {self.scenario}",
            "=" * 40,
            f"状态: {'已解决 ✓' if self.is_solved else '未解决 ✗'}",
            f"运行小时数: {self.hours}",
            f"累计罚分: {self.penalties}",
        ]

        if self.time_series:
            lines.append("\n区域水量:")
            for name, ts in self.time_series.items():
                stats = ts.get_statistics()
                lines.append(f"  - {name}: {stats['mean']:.2f} [{stats['min']:.2f}, {stats['max']:.2f}]")

        if self.warnings:
            lines.append(f"\n警告 ({len(self.warnings)}):")
            for w in self.warnings[:3]:
                lines.append(f"  ⚠️ {w}")

        return "\n".join(lines)


__all__ = [
    'TimeSeriesData',
    'HourRecord',
    'RunResult'
]
