"""
外觀模式示範：以單一介面操作整套家庭劇院。
"""
from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


class Amplifier:
    def on(self):
        say("Amplifier on")

    def off(self):
        say("Amplifier off")

    def set_volume(self, level: int):
        say(f"Setting volume to {level}")


class DvdPlayer:
    def on(self):
        say("DVD Player on")

    def off(self):
        say("DVD Player off")

    def play(self, movie: str):
        say(f"Playing '{movie}'")

    def stop(self):
        say("Stopped")


class Projector:
    def on(self):
        say("Projector on")

    def off(self):
        say("Projector off")

    def set_input(self, dvd: DvdPlayer):
        say("Setting DVD input")


class Lights:
    def on(self):
        say("Lights on")

    def dim(self, level: int):
        say(f"Dimming to {level}%")


class Screen:
    def up(self):
        say("Screen going up")

    def down(self):
        say("Screen going down")


class HomeTheaterFacade:
    """包裝所有子系統的外觀。"""

    def __init__(self):
        self.amp = Amplifier()
        self.dvd = DvdPlayer()
        self.projector = Projector()
        self.lights = Lights()
        self.screen = Screen()

    def watch_movie(self, movie: str) -> None:
        say("Get ready to watch a movie...")
        self.lights.dim(10)
        self.screen.down()
        self.projector.on()
        self.projector.set_input(self.dvd)
        self.amp.on()
        self.amp.set_volume(5)
        self.dvd.on()
        self.dvd.play(movie)

    def end_movie(self) -> None:
        say("Shutting movie theater down...")
        self.dvd.stop()
        self.dvd.off()
        self.amp.off()
        self.projector.off()
        self.screen.up()
        self.lights.on()


class FacadePatternDemo(PatternDemo):
    name = "Facade"
    description = "Provides a simplified interface to a complex subsystem."
    category = PatternCategory.STRUCTURAL.value

    def demonstrate(self) -> None:
        say("Home Theater Facade Example")

        home_theater = HomeTheaterFacade()
        home_theater.watch_movie("The Matrix")
        say()
        home_theater.end_movie()
