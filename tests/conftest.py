import pytest

AI_TEXT = (
    "Artificial intelligence is transforming industries. "
    "It enables new technologies and improves efficiency. "
    "However, ethical challenges remain. "
    "AI applications range from healthcare to finance."
)

@pytest.fixture
def ai_text():
    return AI_TEXT

@pytest.fixture
def long_text():
    return (
        "Solar power is growing quickly across Europe. "
        "Wind power and solar power now supply a large share of electricity. "
        "Many households install solar panels on their roofs. "
        "The football season starts next week.\n\n"
        "Grid operators must balance solar and wind power carefully. "
        "Battery storage helps grid operators store solar power for the evening. "
        "Fans are excited about the football season."
    )
