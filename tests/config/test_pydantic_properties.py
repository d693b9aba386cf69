# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for @config_properties with Pydantic BaseModel binding."""

from __future__ import annotations

import pytest
from pydantic import BaseModel, Field

from cachelist.core.config import Config, config_properties


@config_properties(prefix="cachelist.store")
class StoreProperties(BaseModel):
    url: str = "memory://"
    pool_size: int = Field(default=5, ge=1, le=100)
    timeout: float = Field(default=2.0, gt=0)
    tls: bool = False


@config_properties(prefix="cachelist.tiers")
class TierProperties(BaseModel):
    class Tier(BaseModel):
        key_prefix: str = ""
        duration: int = 0

    name: str = "default"
    hot: Tier = Field(default_factory=Tier)


@config_properties(prefix="cachelist.required")
class RequiredProperties(BaseModel):
    namespace: str
    duration: int = 60


class TestPydanticBind:
    def test_empty_section_uses_defaults(self) -> None:
        props = Config({}).bind(StoreProperties)
        assert props.url == "memory://"
        assert props.pool_size == 5
        assert props.tls is False

    def test_string_values_are_coerced(self) -> None:
        config = Config({"cachelist": {"store": {"pool_size": "20", "timeout": "0.5", "tls": "true"}}})
        props = config.bind(StoreProperties)
        assert props.pool_size == 20
        assert props.timeout == 0.5
        assert props.tls is True

    def test_env_var_overrides_field(self, monkeypatch) -> None:
        monkeypatch.setenv("CACHELIST_STORE_POOL_SIZE", "42")
        config = Config({"cachelist": {"store": {"pool_size": 3}}})
        assert config.bind(StoreProperties).pool_size == 42

    def test_nested_model(self) -> None:
        config = Config({"cachelist": {"tiers": {"name": "web", "hot": {"key_prefix": "h:", "duration": 30}}}})
        props = config.bind(TierProperties)
        assert props.name == "web"
        assert props.hot.key_prefix == "h:"
        assert props.hot.duration == 30


class TestPydanticValidationFailure:
    def test_out_of_range_value(self) -> None:
        config = Config({"cachelist": {"store": {"pool_size": 500}}})
        with pytest.raises(ValueError, match="Configuration validation failed"):
            config.bind(StoreProperties)

    def test_missing_required_field(self) -> None:
        with pytest.raises(ValueError, match="RequiredProperties"):
            Config({}).bind(RequiredProperties)
