"""
代理模式示範：延遲載入圖片的虛擬代理。
"""
import time
from abc import ABC, abstractmethod
from typing import List, Optional

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say

# 模擬從磁碟載入圖片所需的秒數
LOAD_DELAY_SECONDS = 1.0


class Image(ABC):
    @abstractmethod
    def display(self) -> None: ...


class RealImage(Image):
    def __init__(self, filename: str):
        self.filename = filename
        self._load_from_disk()

    def _load_from_disk(self) -> None:
        say(f"Loading {self.filename} from disk...")
        time.sleep(LOAD_DELAY_SECONDS)

    def display(self):
        say(f"Displaying {self.filename}")


class ImageProxy(Image):
    """第一次 display() 時才建立 RealImage，之後重用。"""

    def __init__(self, filename: str):
        self.filename = filename
        self._real_image: Optional[RealImage] = None

    @property
    def is_loaded(self) -> bool:
        return self._real_image is not None

    def display(self):
        if self._real_image is None:
            self._real_image = RealImage(self.filename)
        self._real_image.display()


class ProxyPatternDemo(PatternDemo):
    name = "Proxy"
    description = "Provides a placeholder or surrogate to control access to another object."
    category = PatternCategory.STRUCTURAL.value

    def demonstrate(self) -> None:
        say("Image Proxy Example")

        images: List[Image] = [ImageProxy("photo1.jpg"), ImageProxy("photo2.jpg"), ImageProxy("photo3.jpg")]
        say("Images created (not loaded yet)")

        say("\nDisplaying first image:")
        images[0].display()

        say("\nDisplaying first image again (cached):")
        images[0].display()

        say("\nDisplaying second image:")
        images[1].display()
