"""
调度器基类 (Base Scheduler)
===========================

提供逐时调度决策的抽象基类，支持：
- 决策记录与历史查询
- 调度决策打印
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

from .constants import FLOW_RATE_TO_VOLUME


@dataclass
class TransferCommand:
    """单条输水指令"""
    source: str                                 # 供水区域
    destination: str                            # 受水区域
    canal: str                                  # 渠道名称
    amount: float                               # 计划输水量
    flow_rate: float                            # 实际开度 (0-1)

    @property
    def is_clamped(self) -> bool:
        """开度是否被限幅 (实际输水量小于计划值)"""
        return self.amount > self.flow_rate * FLOW_RATE_TO_VOLUME + 1e-9


@dataclass
class ScheduleDecision:
    """逐时调度决策"""
    hour: int                                   # 决策所属小时
    transfers: List[TransferCommand] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    @property
    def total_planned(self) -> float:
        """本小时计划输水总量"""
        return sum(t.amount for t in self.transfers)

    @property
    def open_canals(self) -> List[str]:
        """本小时开启的渠道"""
        return [t.canal for t in self.transfers]

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return {
            "hour": self.hour,
            "transfers": [
                {
                    "source": t.source,
                    "destination": t.destination,
                    "canal": t.canal,
                    "amount": t.amount,
                    "flow_rate": t.flow_rate
                }
                for t in self.transfers
            ],
            "notes": list(self.notes)
        }


class BaseScheduler(ABC):
    """
    调度器抽象基类

    子类实现 generate_schedule，基类负责历史记录与打印
    """

    def __init__(self, name: str = "Scheduler"):
        self.name = name
        self._history: List[ScheduleDecision] = []

    @abstractmethod
    def generate_schedule(self, hour: int) -> ScheduleDecision:
        """
        生成并下发本小时调度决策

        Args:
            hour: 当前小时

        Returns:
            调度决策
        """
        pass

    def record_decision(self, decision: ScheduleDecision):
        """记录决策到历史"""
        self._history.append(decision)

    def get_history(self, limit: Optional[int] = None) -> List[ScheduleDecision]:
        """获取历史决策 (limit=None 返回全部)"""
        if limit is None:
            return list(self._history)
        return self._history[-limit:]

    def clear_history(self):
        """清除历史"""
        self._history.clear()

    def print_schedule(self, decision: ScheduleDecision):
        """打印调度决策"""
        lines = [
            "=" * 60,
            f"调度决策 - 第 {decision.hour} 小时",
            "=" * 60,
        ]

        if decision.transfers:
            for t in decision.transfers:
                lines.append(
                    f"  - {t.canal}: {t.source} -> {t.destination} "
                    f"计划 {t.amount:.3f}, 开度 {t.flow_rate:.3f}"
                )
        else:
            lines.append("  所有渠道关闭")

        if decision.notes:
            lines.append("\n备注:")
            for note in decision.notes:
                lines.append(f"  • {note}")

        lines.append("=" * 60)
        print("\n".join(lines))


__all__ = [
    'TransferCommand',
    'ScheduleDecision',
    'BaseScheduler'
]
