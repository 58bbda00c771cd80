"""
渠道积分常数 (Canal Integration Constants)
==========================================

定义仿真引擎对渠道流量的积分约定。
调度器把"每小时输水量"换算为渠道开度时必须使用同一组常数，
否则调度结果与仿真引擎的实际输水量不一致。
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FlowConstants:
    """
    渠道流量常数集合 (不可变)

    仿真引擎每秒把 flow_rate 累加到渠道累计量中，一小时共 3600 秒，
    结束时累计量除以 1000 得到实际输水量：

        volume = flow_rate * 3600 / 1000 = 3.6 * flow_rate
    """
    # 时间常数
    SECONDS_PER_HOUR: int = 3600                # h -> s

    # 积分约定
    FLOW_ACCUMULATOR_SCALE: float = 1000.0      # 累计量 -> 输水量
    FLOW_RATE_TO_VOLUME: float = 3.6            # 每小时输水量 / 开度

    # 开度限幅
    MIN_FLOW_RATE: float = 0.0                  # 全关
    MAX_FLOW_RATE: float = 1.0                  # 全开

    @classmethod
    def volume_for_rate(cls, flow_rate: float) -> float:
        """
        计算给定开度一小时的输水量

        Args:
            flow_rate: 渠道开度 (0~1)

        Returns:
            一小时输水量
        """
        return flow_rate * cls.FLOW_RATE_TO_VOLUME

    @classmethod
    def rate_for_volume(cls, volume: float) -> float:
        """
        计算一小时输送给定水量所需开度 (未限幅)

        Args:
            volume: 期望输水量

        Returns:
            渠道开度
        """
        return volume / cls.FLOW_RATE_TO_VOLUME


# ==========================================
# 模块级常量（便捷访问）
# ==========================================
_constants = FlowConstants()

SECONDS_PER_HOUR = _constants.SECONDS_PER_HOUR
FLOW_ACCUMULATOR_SCALE = _constants.FLOW_ACCUMULATOR_SCALE
FLOW_RATE_TO_VOLUME = _constants.FLOW_RATE_TO_VOLUME
MIN_FLOW_RATE = _constants.MIN_FLOW_RATE
MAX_FLOW_RATE = _constants.MAX_FLOW_RATE


__all__ = [
    'FlowConstants',
    'SECONDS_PER_HOUR',
    'FLOW_ACCUMULATOR_SCALE',
    'FLOW_RATE_TO_VOLUME',
    'MIN_FLOW_RATE',
    'MAX_FLOW_RATE'
]
