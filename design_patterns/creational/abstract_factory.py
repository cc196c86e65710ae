"""
抽象工廠模式示範：跨平台 UI 元件主題。
"""
from abc import ABC, abstractmethod

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


class Button(ABC):
    @abstractmethod
    def render(self) -> None: ...

    @abstractmethod
    def click(self) -> None: ...


class TextBox(ABC):
    @abstractmethod
    def render(self) -> None: ...

    @abstractmethod
    def set_text(self, text: str) -> None: ...


class Window(ABC):
    @abstractmethod
    def render(self) -> None: ...

    @abstractmethod
    def minimize(self) -> None: ...

    @abstractmethod
    def close(self) -> None: ...


class UIThemeFactory(ABC):
    """建立同一主題家族 UI 元件的抽象工廠。"""

    @abstractmethod
    def create_button(self) -> Button: ...

    @abstractmethod
    def create_text_box(self) -> TextBox: ...

    @abstractmethod
    def create_window(self) -> Window: ...


class WindowsButton(Button):
    def render(self):
        say("  Rendered Windows-style button with blue theme")

    def click(self):
        say("  Windows button clicked with system sound")


class WindowsTextBox(TextBox):
    def render(self):
        say("  Rendered Windows-style text box with Segoe UI font")

    def set_text(self, text):
        say(f"  Text set: {text}")


class WindowsWindow(Window):
    def render(self):
        say("  Rendered Windows-style window with title bar and system controls")

    def minimize(self):
        say("  Window minimized to taskbar")

    def close(self):
        say("  Window closed with fade animation")


class MacButton(Button):
    def render(self):
        say("  Rendered macOS-style button with rounded corners and subtle shadow")

    def click(self):
        say("  macOS button clicked with elegant haptic feedback")


class MacTextBox(TextBox):
    def render(self):
        say("  Rendered macOS-style text box with San Francisco font")

    def set_text(self, text):
        say(f"  Text set with smooth cursor animation: {text}")


class MacWindow(Window):
    def render(self):
        say("  Rendered macOS-style window with traffic light controls")

    def minimize(self):
        say("  Window minimized with genie effect to dock")

    def close(self):
        say("  Window closed with smooth scale animation")


class LinuxButton(Button):
    def render(self):
        say("  Rendered Linux-style button with GTK theme")

    def click(self):
        say("  Linux button clicked with customizable action")


class LinuxTextBox(TextBox):
    def render(self):
        say("  Rendered Linux-style text box with Liberation Sans font")

    def set_text(self, text):
        say(f"  Text set with vim-style navigation: {text}")


class LinuxWindow(Window):
    def render(self):
        say("  Rendered Linux-style window with customizable window manager")

    def minimize(self):
        say("  Window minimized to workspace switcher")

    def close(self):
        say("  Window closed with configurable behavior")


class WindowsThemeFactory(UIThemeFactory):
    def create_button(self):
        return WindowsButton()

    def create_text_box(self):
        return WindowsTextBox()

    def create_window(self):
        return WindowsWindow()


class MacThemeFactory(UIThemeFactory):
    def create_button(self):
        return MacButton()

    def create_text_box(self):
        return MacTextBox()

    def create_window(self):
        return MacWindow()


class LinuxThemeFactory(UIThemeFactory):
    def create_button(self):
        return LinuxButton()

    def create_text_box(self):
        return LinuxTextBox()

    def create_window(self):
        return LinuxWindow()


class AbstractFactoryPatternDemo(PatternDemo):
    name = "Abstract Factory"
    description = ("Creates families of related objects without specifying their concrete classes. "
                   "Useful when you need to ensure that products from the same family are used together "
                   "and to make the system independent of how its products are created.")
    category = PatternCategory.CREATIONAL.value

    def demonstrate(self) -> None:
        say("Cross-Platform UI Component Factory Example")
        say()

        themes = [
            (WindowsThemeFactory(), "Windows"),
            (MacThemeFactory(), "macOS"),
            (LinuxThemeFactory(), "Linux"),
        ]
        for i, (factory, theme_name) in enumerate(themes):
            if i:
                say()
            self._demonstrate_theme(factory, theme_name)

    @staticmethod
    def _demonstrate_theme(factory: UIThemeFactory, theme_name: str) -> None:
        say(f"Creating {theme_name} UI Components:")

        button = factory.create_button()
        text_box = factory.create_text_box()
        window = factory.create_window()

        button.render()
        text_box.render()
        window.render()

        say(f"All components have consistent {theme_name} styling!")
