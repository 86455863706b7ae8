"""Pytest configuration and fixtures for dotazure tests"""
import json
import os
from pathlib import Path
from unittest import mock

import pytest

@pytest.fixture(autouse=True)
def isolated_environ():
    """Restore os.environ after each test so loaded variables never leak"""
    with mock.patch.dict(os.environ):
        yield

@pytest.fixture
def make_project():
    """Create an azd project layout: azure.yaml, .azure/config.json and per-environment .env files"""
    def _make(root: Path, default_env=None, envs=None, config=None) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        (root / "azure.yaml").write_text("name: sample\n", encoding="utf-8")
        azure_dir = root / ".azure"
        azure_dir.mkdir(exist_ok=True)
        if config is None and default_env is not None:
            config = {"version": 1, "defaultEnvironment": default_env}
        if config is not None:
            (azure_dir / "config.json").write_text(json.dumps(config), encoding="utf-8")
        for name, content in (envs or {}).items():
            env_root = azure_dir / name
            env_root.mkdir(exist_ok=True)
            (env_root / ".env").write_text(content, encoding="utf-8")
        return root
    return _make

@pytest.fixture
def project(tmp_path, make_project):
    """A project with default environment 'dev' defining FOO=bar"""
    return make_project(tmp_path / "proj", default_env="dev", envs={"dev": 'FOO="bar"\n'})
