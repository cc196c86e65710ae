import io

import pytest
from rich.console import Console

from design_patterns.pattern_demo import PatternCategory, PatternDemo


def make_demo(name, category, action=None, description=""):
    """建立一個測試用的示範 class。"""

    def demonstrate(self):
        self.runs += 1
        if action is not None:
            action()

    return type(
        name.replace(" ", "") + "Demo",
        (PatternDemo,),
        {
            "name": name,
            "description": description or f"{name} description",
            "category": category,
            "runs": 0,
            "demonstrate": demonstrate,
        },
    )


def explode():
    raise RuntimeError("boom")


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def console(output):
    return Console(file=output, width=200, color_system=None)


@pytest.fixture
def sample_factories():
    return [
        make_demo("Zeta", PatternCategory.BEHAVIORAL.value),
        make_demo("Alpha", PatternCategory.CREATIONAL.value),
        make_demo("Beta", PatternCategory.CREATIONAL.value),
    ]


@pytest.fixture(autouse=True)
def no_demo_delays(monkeypatch):
    from design_patterns.behavioral import state
    from design_patterns.structural import proxy

    monkeypatch.setattr(proxy, "LOAD_DELAY_SECONDS", 0)
    monkeypatch.setattr(state, "STEP_DELAY_SECONDS", 0)
