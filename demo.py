#!/usr/bin/env python3
"""
灌渠逐时调水系统演示
====================

演示:
1. 默认三角网络调水
2. 各预置场景对比
3. 自定义网络拓扑
"""

from acequia import HourlyBalancer, Region, Canal, AcequiaManager
from acequia.network.topology import topology_from_canals
from acequia.simulation.scenarios import create_scenario, list_scenarios


def demo_default():
    """演示默认场景"""
    print("\n" + "="*60)
    print("演示1: 默认三角网络")
    print("="*60)

    manager = create_scenario('default', simulation_max=24)
    HourlyBalancer(manager, verbose=True).run()

    print(manager.result().summary())


def demo_compare_presets():
    """对比预置场景"""
    print("\n" + "="*60)
    print("演示2: 预置场景对比")
    print("="*60)

    for name in list_scenarios():
        manager = create_scenario(name, simulation_max=24)
        HourlyBalancer(manager).run()
        result = manager.result()
        print(f"  {name:<12} 小时数={result.hours:<3} 罚分={result.penalties:<4} "
              f"已解决={'是' if result.is_solved else '否'}")


def demo_custom_network():
    """自定义网络: 水库向农田和城镇供水"""
    print("\n" + "="*60)
    print("演示3: 自定义网络")
    print("="*60)

    regions = [
        Region("Reservoir", 500.0, 100.0, 600.0),
        Region("Farm", 0.0, 50.0, 100.0),
        Region("Town", 0.0, 20.0, 40.0),
    ]
    canals = [
        Canal("reservoir-farm", "Reservoir", "Farm"),
        Canal("reservoir-town", "Reservoir", "Town"),
    ]
    manager = AcequiaManager(regions, canals, simulation_max=48, name="custom")

    balancer = HourlyBalancer(manager, topology=topology_from_canals(regions, canals))
    balancer.run()

    print(manager.result().summary())


if __name__ == '__main__':
    demo_default()
    demo_compare_presets()
    demo_custom_network()
