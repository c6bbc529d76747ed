"""asn1opt 测试公共夹具."""

import pytest

from asn1opt import EnvConfig, MAX_FRAMES_KEY


@pytest.fixture(autouse=True)
def _clean_max_frames_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """确保环境变量中的覆盖值不会影响测试."""
    monkeypatch.delenv(EnvConfig().env_name(MAX_FRAMES_KEY), raising=False)
