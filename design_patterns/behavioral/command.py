"""
命令模式示範：智慧家庭遙控器，支援復原、巨集與排程佇列。
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, NamedTuple, Optional, Tuple

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


# 接收者

class SmartLight:
    def __init__(self, location: str):
        self.location = location
        self.is_on = False
        self.brightness = 100

    def turn_on(self, brightness: int = 100) -> None:
        self.is_on = True
        self.brightness = brightness
        say(f"    {self.location} light turned ON (brightness: {self.brightness}%)")

    def turn_off(self) -> None:
        self.is_on = False
        say(f"    {self.location} light turned OFF")

    def set_brightness(self, brightness: int) -> None:
        if self.is_on:
            self.brightness = _clamp(brightness, 0, 100)
            say(f"    {self.location} light brightness set to {self.brightness}%")

    def get_state(self) -> Tuple[bool, int]:
        return self.is_on, self.brightness


class SmartThermostat:
    MIN_TEMPERATURE = 50
    MAX_TEMPERATURE = 85

    def __init__(self, zone: str):
        self.zone = zone
        self.temperature = 70

    def set_temperature(self, temperature: int) -> None:
        old_temperature = self.temperature
        self.temperature = _clamp(temperature, self.MIN_TEMPERATURE, self.MAX_TEMPERATURE)
        if self.temperature > old_temperature:
            trend = "(warmer)"
        elif self.temperature < old_temperature:
            trend = "(cooler)"
        else:
            trend = "(unchanged)"
        say(f"    {self.zone} thermostat set to {self.temperature}F {trend}")


class MusicState(NamedTuple):
    is_playing: bool
    playlist: Optional[str]
    volume: int


class MusicSystem:
    def __init__(self, name: str):
        self.name = name
        self.is_playing = False
        self.current_playlist: Optional[str] = None
        self.volume = 50

    def play(self, playlist: str) -> None:
        self.is_playing = True
        self.current_playlist = playlist
        say(f"    {self.name} playing: {playlist}")

    def stop(self) -> None:
        self.is_playing = False
        say(f"    {self.name} stopped")

    def set_volume(self, volume: int) -> None:
        self.volume = _clamp(volume, 0, 100)
        say(f"    {self.name} volume set to {self.volume}%")

    def get_state(self) -> MusicState:
        return MusicState(self.is_playing, self.current_playlist, self.volume)


# 命令

class Command(ABC):
    @abstractmethod
    def execute(self) -> None: ...

    @abstractmethod
    def undo(self) -> None: ...

    @abstractmethod
    def get_description(self) -> str: ...


class LightOnCommand(Command):
    def __init__(self, light: SmartLight, brightness: int = 100):
        self._light = light
        self._brightness = brightness
        self._previous_state: Tuple[bool, int] = (False, 100)

    def execute(self):
        self._previous_state = self._light.get_state()
        self._light.turn_on(self._brightness)

    def undo(self):
        was_on, brightness = self._previous_state
        if was_on:
            self._light.turn_on(brightness)
        else:
            self._light.turn_off()
        say(f"    Undid: Turn on {self._light.location} light")

    def get_description(self):
        return f"Turn on {self._light.location} light (brightness: {self._brightness}%)"


class LightOffCommand(Command):
    def __init__(self, light: SmartLight):
        self._light = light
        self._previous_state: Tuple[bool, int] = (False, 100)

    def execute(self):
        self._previous_state = self._light.get_state()
        self._light.turn_off()

    def undo(self):
        was_on, brightness = self._previous_state
        if was_on:
            self._light.turn_on(brightness)
        say(f"    Undid: Turn off {self._light.location} light")

    def get_description(self):
        return f"Turn off {self._light.location} light"


class SetTemperatureCommand(Command):
    def __init__(self, thermostat: SmartThermostat, temperature: int):
        self._thermostat = thermostat
        self._temperature = temperature
        self._previous_temperature = thermostat.temperature

    def execute(self):
        self._previous_temperature = self._thermostat.temperature
        self._thermostat.set_temperature(self._temperature)

    def undo(self):
        self._thermostat.set_temperature(self._previous_temperature)
        say(f"    Undid: Set {self._thermostat.zone} thermostat to {self._temperature}F")

    def get_description(self):
        return f"Set {self._thermostat.zone} thermostat to {self._temperature}F"


class PlayMusicCommand(Command):
    def __init__(self, music_system: MusicSystem, playlist: str):
        self._music_system = music_system
        self._playlist = playlist
        self._previous_state = music_system.get_state()

    def execute(self):
        self._previous_state = self._music_system.get_state()
        self._music_system.play(self._playlist)

    def undo(self):
        if self._previous_state.is_playing and self._previous_state.playlist is not None:
            self._music_system.play(self._previous_state.playlist)
        else:
            self._music_system.stop()
        say(f"    Undid: Play {self._playlist} on {self._music_system.name}")

    def get_description(self):
        return f"Play {self._playlist} on {self._music_system.name}"


class SetVolumeCommand(Command):
    def __init__(self, music_system: MusicSystem, volume: int):
        self._music_system = music_system
        self._volume = volume
        self._previous_volume = music_system.volume

    def execute(self):
        self._previous_volume = self._music_system.volume
        self._music_system.set_volume(self._volume)

    def undo(self):
        self._music_system.set_volume(self._previous_volume)
        say(f"    Undid: Set {self._music_system.name} volume to {self._volume}%")

    def get_description(self):
        return f"Set {self._music_system.name} volume to {self._volume}%"


class MacroCommand(Command):
    """依序執行多個命令，復原時反向執行。"""

    def __init__(self, name: str, commands: List[Command]):
        self._name = name
        self._commands = list(commands)

    def execute(self):
        say(f"    Executing macro: {self._name}")
        for command in self._commands:
            command.execute()

    def undo(self):
        say(f"    Undoing macro: {self._name}")
        for command in reversed(self._commands):
            command.undo()

    def get_description(self):
        return f"Macro: {self._name} ({len(self._commands)} commands)"


class NoCommand(Command):
    def execute(self):
        say("    No command assigned")

    def undo(self):
        say("    Nothing to undo")

    def get_description(self):
        return "No command"


# 呼叫者

class SmartHomeRemote:
    def __init__(self):
        self._command: Command = NoCommand()
        self._undo_stack: List[Command] = []

    def set_command(self, command: Command) -> None:
        self._command = command

    def press_button(self) -> None:
        say(f"  Executing: {self._command.get_description()}")
        self._command.execute()
        self._undo_stack.append(self._command)

    def press_undo(self) -> None:
        if not self._undo_stack:
            say("  Nothing to undo")
            return
        last_command = self._undo_stack.pop()
        say(f"  Undoing: {last_command.get_description()}")
        last_command.undo()

    def clear_history(self) -> None:
        self._undo_stack.clear()
        say("  Command history cleared")


@dataclass
class ScheduledCommand:
    command: Command
    execute_at: datetime
    description: str = ""


class CommandScheduler:
    """保存排程命令，並執行已到期的命令。"""

    def __init__(self):
        self._scheduled: List[ScheduledCommand] = []

    @property
    def pending(self) -> int:
        return len(self._scheduled)

    def schedule_command(self, command: Command, execute_at: datetime, description: str = "") -> None:
        self._scheduled.append(ScheduledCommand(command, execute_at, description))
        say(f"    Scheduled: {command.get_description()} at {execute_at:%H:%M:%S}")

    def execute_scheduled_commands(self, now: Optional[datetime] = None) -> int:
        """
        執行所有到期的命令。

        Args:
            now: 目前時間，預設為 datetime.now()

        Returns:
            執行的命令數量
        """
        now = now or datetime.now()
        due = sorted((sc for sc in self._scheduled if sc.execute_at <= now), key=lambda sc: sc.execute_at)

        for scheduled in due:
            say(f"    Executing scheduled: {scheduled.description}")
            scheduled.command.execute()
            self._scheduled.remove(scheduled)

        if not due:
            say("    No commands ready for execution")
        return len(due)


class _Devices(NamedTuple):
    living_room_light: SmartLight
    kitchen_light: SmartLight
    thermostat: SmartThermostat
    music_system: MusicSystem


def _create_devices() -> _Devices:
    return _Devices(
        living_room_light=SmartLight("Living Room"),
        kitchen_light=SmartLight("Kitchen"),
        thermostat=SmartThermostat("Main"),
        music_system=MusicSystem("Home Audio"),
    )


class CommandPatternDemo(PatternDemo):
    name = "Command"
    description = ("Encapsulates a request as an object, allowing you to parameterize clients with different requests, "
                   "queue or log requests, and support undo operations. Useful for implementing macro commands, "
                   "undo/redo functionality, and decoupling the invoker from the receiver.")
    category = PatternCategory.BEHAVIORAL.value

    def demonstrate(self) -> None:
        say("Smart Home Automation Command Example")
        say()
        self._demonstrate_basic_commands()
        say()
        self._demonstrate_macro_commands()
        say()
        self._demonstrate_undo()
        say()
        self._demonstrate_command_queue()

    @staticmethod
    def _demonstrate_basic_commands() -> None:
        say("Basic Device Commands:")

        music_system = MusicSystem("Sonos")
        remote = SmartHomeRemote()
        commands: List[Command] = [
            LightOnCommand(SmartLight("Living Room")),
            LightOffCommand(SmartLight("Kitchen")),
            SetTemperatureCommand(SmartThermostat("Main"), 72),
            PlayMusicCommand(music_system, "Classical Playlist"),
            SetVolumeCommand(music_system, 60),
        ]
        for command in commands:
            remote.set_command(command)
            remote.press_button()

    @staticmethod
    def _demonstrate_macro_commands() -> None:
        say("Macro Commands (Multiple Actions):")

        devices = _create_devices()
        remote = SmartHomeRemote()

        movie_night = MacroCommand("Movie Night", [
            LightOffCommand(devices.living_room_light),
            LightOnCommand(devices.kitchen_light, 20),
            SetTemperatureCommand(devices.thermostat, 68),
            PlayMusicCommand(devices.music_system, "Movie Soundtracks"),
            SetVolumeCommand(devices.music_system, 40),
        ])
        say("  Executing 'Movie Night' macro...")
        remote.set_command(movie_night)
        remote.press_button()
        say()

        good_morning = MacroCommand("Good Morning", [
            LightOnCommand(devices.living_room_light, 80),
            LightOnCommand(devices.kitchen_light, 100),
            SetTemperatureCommand(devices.thermostat, 70),
            PlayMusicCommand(devices.music_system, "Morning Jazz"),
            SetVolumeCommand(devices.music_system, 50),
        ])
        say("  Executing 'Good Morning' macro...")
        remote.set_command(good_morning)
        remote.press_button()

    @staticmethod
    def _demonstrate_undo() -> None:
        say("Undo Functionality:")

        light = SmartLight("Bedroom")
        remote = SmartHomeRemote()
        commands: List[Command] = [
            LightOnCommand(light),
            LightOffCommand(light),
            LightOnCommand(light, 50),
            LightOnCommand(light, 100),
        ]

        say("  Executing commands:")
        for command in commands:
            remote.set_command(command)
            remote.press_button()

        say("\n  Undoing last 3 commands:")
        for _ in range(3):
            remote.press_undo()

    @staticmethod
    def _demonstrate_command_queue() -> None:
        say("Scheduled Command Queue:")

        devices = _create_devices()
        scheduler = CommandScheduler()
        start = datetime.now()

        scheduler.schedule_command(LightOnCommand(devices.living_room_light),
                                   start + timedelta(seconds=1), "Morning lights")
        scheduler.schedule_command(SetTemperatureCommand(devices.thermostat, 68),
                                   start + timedelta(seconds=2), "Lower temperature")
        scheduler.schedule_command(PlayMusicCommand(devices.music_system, "Wake Up Playlist"),
                                   start + timedelta(seconds=3), "Start music")

        say("  Commands scheduled. Executing queue right away...")
        scheduler.execute_scheduled_commands(now=start)

        say("  Two seconds later...")
        scheduler.execute_scheduled_commands(now=start + timedelta(seconds=2))
        say(f"  Still pending: {scheduler.pending}")
