"""
狀態模式示範：紅綠燈依目前狀態切換行為。
"""
import time
from abc import ABC, abstractmethod

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say

# 每次切換燈號之間的停頓秒數
STEP_DELAY_SECONDS = 0.5


class TrafficLightState(ABC):
    label = ""

    @abstractmethod
    def handle(self, context: "TrafficLight") -> None: ...


class RedState(TrafficLightState):
    label = "RED"

    def handle(self, context):
        say("RED - Stop! Changing to Green...")
        context.set_state(GreenState())


class GreenState(TrafficLightState):
    label = "GREEN"

    def handle(self, context):
        say("GREEN - Go! Changing to Yellow...")
        context.set_state(YellowState())


class YellowState(TrafficLightState):
    label = "YELLOW"

    def handle(self, context):
        say("YELLOW - Caution! Changing to Red...")
        context.set_state(RedState())


class TrafficLight:
    def __init__(self):
        self.state: TrafficLightState = RedState()
        say("Traffic light initialized")

    def set_state(self, new_state: TrafficLightState) -> None:
        self.state = new_state

    def request(self) -> None:
        self.state.handle(self)


class StatePatternDemo(PatternDemo):
    name = "State"
    description = "Allows an object to alter its behavior when its internal state changes."
    category = PatternCategory.BEHAVIORAL.value

    def demonstrate(self) -> None:
        say("Traffic Light State Example")

        traffic_light = TrafficLight()
        for _ in range(6):
            traffic_light.request()
            time.sleep(STEP_DELAY_SECONDS)
