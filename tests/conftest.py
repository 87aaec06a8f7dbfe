import pytest

from id3.dataset import Instance

TENNIS_CODES: dict[str, int] = {
    "sunny": 2,
    "overcast": 1,
    "rain": 0,
    "hot": 2,
    "mild": 1,
    "cool": 0,
    "high": 1,
    "normal": 0,
    "strong": 1,
    "weak": 0,
}

TENNIS_ROWS: list[tuple[str, str, str, str, bool]] = [
    ("sunny", "hot", "high", "weak", False),
    ("sunny", "hot", "high", "strong", False),
    ("overcast", "hot", "high", "weak", True),
    ("rain", "mild", "high", "weak", True),
    ("rain", "cool", "normal", "weak", True),
    ("rain", "cool", "normal", "strong", False),
    ("overcast", "cool", "normal", "strong", True),
    ("sunny", "mild", "high", "weak", False),
    ("sunny", "cool", "normal", "weak", True),
    ("rain", "mild", "normal", "weak", True),
    ("sunny", "mild", "normal", "strong", True),
    ("overcast", "mild", "high", "strong", True),
    ("overcast", "hot", "normal", "weak", True),
    ("rain", "mild", "high", "strong", False),
]


def make_instances(rows: list[tuple[dict[str, int], bool]]) -> list[Instance]:
    return [Instance(features=dict(features), target=target) for features, target in rows]


@pytest.fixture
def candy_dataset() -> list[Instance]:
    """Candy "yumminess": sweet alone separates the classes, salty does not"""
    return make_instances(
        [
            ({"salty": 0, "sweet": 0}, False),  # bland
            ({"salty": 1, "sweet": 0}, False),  # disgusting
            ({"salty": 1, "sweet": 1}, True),  # savory
            ({"salty": 0, "sweet": 1}, True),  # sugary
        ]
    )


@pytest.fixture
def tennis_dataset() -> list[Instance]:
    """The 14 canonical play-tennis days"""
    return [
        Instance(
            features={
                "outlook": TENNIS_CODES[outlook],
                "temp": TENNIS_CODES[temp],
                "humidity": TENNIS_CODES[humidity],
                "wind": TENNIS_CODES[wind],
            },
            target=play,
        )
        for outlook, temp, humidity, wind, play in TENNIS_ROWS
    ]


@pytest.fixture
def noisy_training_dataset() -> list[Instance]:
    """Target is `a`, except one mislabeled (a=1, b=1) instance that ID3 overfits"""
    return make_instances(
        [({"a": 0, "b": 0}, False)] * 3
        + [({"a": 0, "b": 1}, False)] * 3
        + [({"a": 1, "b": 0}, True)] * 3
        + [({"a": 1, "b": 1}, False)]
    )


@pytest.fixture
def clean_validation_dataset() -> list[Instance]:
    """Clean held-out data where (a=1, b=1) is True"""
    return make_instances(
        [
            ({"a": 1, "b": 1}, True),
            ({"a": 1, "b": 1}, True),
            ({"a": 1, "b": 0}, True),
            ({"a": 0, "b": 0}, False),
            ({"a": 0, "b": 1}, False),
        ]
    )
