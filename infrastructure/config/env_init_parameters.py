# infrastructure/config/env_init_parameters.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values, load_dotenv

from application.services.resource_url_resolver import RESOURCE_CONTEXT_INIT_PARAM


# .envファイルを自動ロード（プロジェクトルートから）
_env_path = Path(__file__).parent.parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

ENV_TO_INIT_PARAM = {
    "RESOURCE_CONTEXT_PATH": RESOURCE_CONTEXT_INIT_PARAM,
}


class EnvInitParameterProvider:
    """
    環境変数と.envファイルから web アプリケーションの init parameter を提供する

    RESOURCE_CONTEXT_PATH は resourceContextPath として扱われる。
    .envファイルの値が環境変数より優先される。
    """

    def __init__(self, env_path: Optional[Path] = None):
        path = env_path if env_path is not None else _env_path
        if path.exists():
            self._env_vars: Dict[str, Optional[str]] = dict(dotenv_values(path))
        else:
            self._env_vars = {}

        for key, value in os.environ.items():
            if key not in self._env_vars:
                self._env_vars[key] = value

    def setting(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._env_vars.get(key)
        if value is None or not value.strip():
            return default
        return value.strip()

    def get(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        for env_key, param_name in ENV_TO_INIT_PARAM.items():
            value = self.setting(env_key)
            if value is not None:
                params[param_name] = value
        return params
