from __future__ import annotations

from lsm.application.errors import NotImplementedFeature


async def execute(city: str) -> dict:
    raise NotImplementedFeature(
        "Weather forecast provider not configured", details={"city": city}
    )
