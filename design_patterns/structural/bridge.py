"""
橋接模式示範：遙控器（抽象）與裝置（實作）各自獨立變化。
"""
from abc import ABC, abstractmethod

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


class Device(ABC):
    @abstractmethod
    def is_enabled(self) -> bool: ...

    @abstractmethod
    def enable(self) -> None: ...

    @abstractmethod
    def disable(self) -> None: ...

    @abstractmethod
    def get_volume(self) -> int: ...

    @abstractmethod
    def set_volume(self, volume: int) -> None: ...


class _SimpleDevice(Device):
    label = "Device"

    def __init__(self, volume: int):
        self._enabled = False
        self._volume = volume

    def is_enabled(self):
        return self._enabled

    def enable(self):
        self._enabled = True
        say(f"{self.label} is ON")

    def disable(self):
        self._enabled = False
        say(f"{self.label} is OFF")

    def get_volume(self):
        return self._volume

    def set_volume(self, volume):
        self._volume = volume
        say(f"{self.label} volume: {volume}")


class TV(_SimpleDevice):
    label = "TV"

    def __init__(self):
        super().__init__(volume=50)


class Radio(_SimpleDevice):
    label = "Radio"

    def __init__(self):
        super().__init__(volume=30)


class BasicRemote:
    def __init__(self, device: Device):
        self.device = device

    def power(self) -> None:
        if self.device.is_enabled():
            self.device.disable()
        else:
            self.device.enable()

    def volume_up(self) -> None:
        self.device.set_volume(self.device.get_volume() + 10)


class AdvancedRemote(BasicRemote):
    def mute(self) -> None:
        self.device.set_volume(0)


class BridgePatternDemo(PatternDemo):
    name = "Bridge"
    description = "Separates abstraction from implementation so both can vary independently."
    category = PatternCategory.STRUCTURAL.value

    def demonstrate(self) -> None:
        say("Remote Control Bridge Example")

        basic_remote = BasicRemote(TV())
        advanced_remote = AdvancedRemote(Radio())

        basic_remote.power()
        basic_remote.volume_up()

        advanced_remote.power()
        advanced_remote.mute()
