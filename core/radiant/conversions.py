"""Temperature conversions between the Messana API (°F) and HomeKit (°C)."""


def to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32) * 5.0 / 9


def to_fahrenheit(celsius: float) -> float:
    return celsius * 9.0 / 5 + 32
