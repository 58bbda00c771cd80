"""
逐时调度器测试
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from acequia.control.balancer import (
    INFEASIBLE_MESSAGE, check_feasibility, HourlyBalancer, solve_problems
)
from acequia.network.canal import Canal
from acequia.network.region import Region
from acequia.network.topology import topology_from_canals
from acequia.simulation.manager import AcequiaManager
from acequia.simulation.scenarios import create_scenario


class StubManager:
    """只推进小时、从不判定已解决的仿真"""

    def __init__(self, regions, canals, simulation_max=5):
        self.regions = regions
        self.canals = canals
        self.hour = 0
        self.simulation_max = simulation_max
        self.is_solved = False
        self.canal_log = []

    def get_regions(self):
        return self.regions

    def get_canals(self):
        return self.canals

    def next_hour(self):
        self.canal_log.append([(c.name, c.flow_rate, c.is_open) for c in self.canals])
        self.hour += 1


class TestFeasibility:
    """可行性检查测试"""

    def test_totals(self):
        regions = [Region("A", 10.0, 20.0, 50.0), Region("B", 30.0, 5.0, 50.0)]
        report = check_feasibility(regions)

        assert report.total_water == pytest.approx(40.0)
        assert report.total_need == pytest.approx(25.0)
        assert report.is_winnable is True
        assert report.shortfall == 0.0

    def test_insufficient(self):
        regions = [Region("A", 10.0, 20.0, 50.0), Region("B", 5.0, 30.0, 50.0)]
        report = check_feasibility(regions)

        assert report.is_winnable is False
        assert report.shortfall == pytest.approx(35.0)

    def test_empty(self):
        assert check_feasibility([]).is_winnable is True


class TestHourlyBalancer:
    """逐时调度循环测试"""

    def test_first_hour_decision(self):
        """第一小时只开启 A 渠道"""
        manager = create_scenario('default', simulation_max=1)
        decisions = HourlyBalancer(manager).run()

        assert len(decisions) == 1
        transfers = decisions[0].transfers
        assert [t.canal for t in transfers] == ["canal_A"]
        assert transfers[0].amount == pytest.approx(50.0)
        assert transfers[0].flow_rate == 1.0
        assert transfers[0].is_clamped is True
        assert decisions[0].notes

    def test_water_moves_over_hours(self):
        """每小时全开输水 3.6"""
        manager = create_scenario('default', simulation_max=2)
        HourlyBalancer(manager).run()

        assert manager.get_region('South').water_level == pytest.approx(17.2)
        assert manager.get_region('North').water_level == pytest.approx(92.8)
        assert manager.hour == 2

    def test_default_scenario_converges(self):
        """南区最终达到需水量，北区不低于需水量"""
        manager = create_scenario('default', simulation_max=24)
        HourlyBalancer(manager).run()

        assert manager.get_region('South').water_level == pytest.approx(60.0)
        assert manager.get_region('North').water_level >= 50.0 - 1e-6
        assert manager.hour <= 24

    def test_balanced_never_transfers(self):
        """无需调水时所有渠道每小时都关闭"""
        manager = create_scenario('balanced')
        stub = StubManager(manager.get_regions(), manager.get_canals(), simulation_max=6)
        decisions = HourlyBalancer(stub).run()

        assert len(decisions) == 6
        assert all(not d.transfers for d in decisions)
        for hour_state in stub.canal_log:
            assert all(rate == 0.0 and not is_open for _, rate, is_open in hour_state)

    def test_stops_when_solved(self):
        """已解决时停止"""
        manager = create_scenario('balanced', simulation_max=10)
        decisions = HourlyBalancer(manager).run()

        assert manager.is_solved is True
        assert manager.hour == 1
        assert len(decisions) == 1

    def test_runs_to_ceiling(self):
        """未解决时运行至最大小时数"""
        manager = create_scenario('unwinnable', simulation_max=5)
        decisions = HourlyBalancer(manager).run()

        assert manager.hour == 5
        assert manager.is_solved is False
        assert len(decisions) == 5

    def test_no_hours(self):
        """最大小时数为0时不推进"""
        manager = create_scenario('default', simulation_max=0)
        assert HourlyBalancer(manager).run() == []
        assert manager.hour == 0

    def test_canals_reset_each_hour(self):
        """上一小时的渠道设置不会残留"""
        regions = [Region("North", 100.0, 50.0, 150.0), Region("South", 10.0, 60.0, 100.0),
                   Region("East", 50.0, 40.0, 80.0)]
        canals = [Canal("canal_A"), Canal("canal_B"), Canal("canal_C"), Canal("canal_D")]
        for c in canals:
            c.set_flow_rate(0.9)
            c.toggle_open(True)

        stub = StubManager(regions, canals, simulation_max=1)
        HourlyBalancer(stub).run()

        state = {name: (rate, is_open) for name, rate, is_open in stub.canal_log[0]}
        assert state["canal_A"] == (1.0, True)
        assert state["canal_B"] == (0.0, False)
        assert state["canal_C"] == (0.0, False)
        assert state["canal_D"] == (0.0, False)

    def test_history_recorded(self):
        """决策写入历史"""
        manager = create_scenario('unwinnable', simulation_max=3)
        balancer = HourlyBalancer(manager)
        balancer.run()

        history = balancer.get_history()
        assert [d.hour for d in history] == [0, 1, 2]

    def test_history_keeps_every_hour(self):
        """超过 100 小时的运行保留完整历史"""
        manager = create_scenario('unwinnable', simulation_max=150)
        balancer = HourlyBalancer(manager)
        balancer.run()

        history = balancer.get_history()
        assert len(history) == 150
        assert history[-1].hour == 149
        assert [d.hour for d in balancer.get_history(limit=5)] == [145, 146, 147, 148, 149]

    def test_unresolved_names_are_noop(self):
        """名称无法解析时静默跳过"""
        regions = [Region("Upper", 100.0, 10.0, 150.0), Region("Lower", 0.0, 60.0, 100.0)]
        canals = [Canal("ditch", "Upper", "Lower")]
        manager = AcequiaManager(regions, canals, simulation_max=3)

        decisions = HourlyBalancer(manager).run()

        assert len(decisions) == 3
        assert all(not d.transfers for d in decisions)
        assert regions[1].water_level == 0.0


class TestAdvisoryMessage:
    """水量不足提示测试"""

    def test_printed_once(self, capsys):
        """提示只在循环开始前输出一次，循环照常运行"""
        manager = create_scenario('unwinnable', simulation_max=4)
        solve_problems(manager)

        out = capsys.readouterr().out
        assert out.count(">>> Scenario determined unwinnable based on initial conditions.") == 1
        assert out.count(">>> Simulation will run, but a perfect solution is impossible.") == 1
        assert out.startswith(INFEASIBLE_MESSAGE)
        assert manager.hour == 4

    def test_not_printed_when_sufficient(self, capsys):
        manager = create_scenario('default', simulation_max=1)
        solve_problems(manager)

        assert ">>>" not in capsys.readouterr().out

    def test_solve_problems_returns_none(self):
        manager = create_scenario('default', simulation_max=1)
        assert solve_problems(manager) is None

    def test_library_use_writes_nothing_to_stderr(self, capfd):
        """作为库调用时，提示只出现在 stdout，stderr 无任何输出"""
        import logging
        handlers = logging.getLogger('Acequia').handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

        solve_problems(create_scenario('unwinnable', simulation_max=2))

        out, err = capfd.readouterr()
        assert err == ""
        assert out.count(">>> Scenario determined unwinnable based on initial conditions.") == 1

    def test_non_triangle_network_writes_nothing_to_stderr(self, capfd):
        """角色未匹配的网络不向 stderr 输出告警"""
        regions = [Region("Upper", 100.0, 10.0, 150.0), Region("Lower", 0.0, 60.0, 100.0)]
        canals = [Canal("ditch", "Upper", "Lower")]
        solve_problems(StubManager(regions, canals, simulation_max=1))

        assert capfd.readouterr().err == ""


class TestSyntheticTopology:
    """注入拓扑测试"""

    def test_arbitrary_graph(self):
        """任意区域与渠道"""
        regions = [
            Region("Reservoir", 500.0, 100.0, 600.0),
            Region("Farm", 0.0, 50.0, 100.0),
            Region("Town", 0.0, 20.0, 40.0),
        ]
        canals = [Canal("r-f", "Reservoir", "Farm"), Canal("r-t", "Reservoir", "Town")]
        manager = AcequiaManager(regions, canals, simulation_max=1)

        balancer = HourlyBalancer(manager, topology=topology_from_canals(regions, canals))
        decisions = balancer.run()

        amounts = {t.canal: t.amount for t in decisions[0].transfers}
        assert amounts["r-f"] == pytest.approx(50.0)
        assert amounts["r-t"] == pytest.approx(20.0)
        assert regions[1].water_level == pytest.approx(3.6)
        assert regions[2].water_level == pytest.approx(3.6)

    def test_routes_read_pre_hour_state(self):
        """同一小时内各路线都基于本小时开始时的水量"""
        regions = [
            Region("Src", 52.0, 50.0, 100.0),
            Region("Dst1", 0.0, 10.0, 100.0),
            Region("Dst2", 0.0, 10.0, 100.0),
        ]
        canals = [Canal("one", "Src", "Dst1"), Canal("two", "Src", "Dst2")]
        stub = StubManager(regions, canals, simulation_max=1)

        balancer = HourlyBalancer(stub, topology=topology_from_canals(regions, canals))
        decisions = balancer.run()

        # 两条路线都按可调出量 2 计划
        assert [t.amount for t in decisions[0].transfers] == [pytest.approx(2.0), pytest.approx(2.0)]
