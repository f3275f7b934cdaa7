"""FastAPI アプリケーション - リソース URL 解決の REST API"""
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from fastapi import Body, FastAPI, HTTPException
from pydantic import BaseModel, Field

import sys

# プロジェクトルートをPythonパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from infrastructure.config.env_init_parameters import EnvInitParameterProvider
from infrastructure.container.base_loader import ContainerLoadError
from infrastructure.container.file_finder import ContainerFileFinder
from infrastructure.container.in_memory_page_context import InMemoryPageContext
from infrastructure.container.in_memory_servlet_container import InMemoryServletContainer
from infrastructure.container.loader_registry import ContainerLoaderRegistry
from infrastructure.logging.console_logger import ConsoleLogger
from application.exceptions import TagError
from application.tags.resource_include_tag import ResourceIncludeTag
from domain.exceptions import ValidationError
from domain.resource_request import AttributeScope


# リクエストモデル
class ResourceIncludeRequest(BaseModel):
    """リソース URL 解決リクエスト"""
    value: str = Field(description="Resource path, with or without a leading slash")
    var: Optional[str] = Field(
        default=None,
        description="Store the URL under this attribute name instead of printing it.",
    )
    scope: Optional[str] = Field(
        default=None,
        description="Attribute scope for var: page, request, session or application.",
    )


class ResourceIncludeResponse(BaseModel):
    """リソース URL 解決レスポンス"""
    url: str = Field(description="Resolved resource URL")
    var: Optional[str] = Field(default=None, description="Attribute name the URL was stored under")
    scope: Optional[str] = Field(default=None, description="Attribute scope")
    output: Optional[str] = Field(default=None, description="Printed output when no var is given")


class ContextResponse(BaseModel):
    """Deployed web application"""
    path: str = Field(description="Context path")
    init_parameters: Dict[str, str] = Field(description="Init parameters")


# 設定
DEFAULT_CONFIG_DIR = project_root / "config"
DEFAULT_CONFIG_NAME = "container"
DEFAULT_CURRENT_CONTEXT = "/portal"


def _find_container_config(env: EnvInitParameterProvider) -> Tuple[Optional[Path], bool]:
    """Return (path, explicit). Relative settings resolve against the project root."""
    configured = env.setting("RESOURCE_CONTAINER_CONFIG")
    if configured:
        path = Path(configured)
        if not path.is_absolute():
            path = project_root / path
        return path, True
    return ContainerFileFinder(DEFAULT_CONFIG_DIR).find_by_name(DEFAULT_CONFIG_NAME), False


def _build_container(
    config_path: Optional[Path] = None,
    env: Optional[EnvInitParameterProvider] = None,
) -> InMemoryServletContainer:
    env = env or EnvInitParameterProvider()
    explicit = config_path is not None
    if config_path is None:
        config_path, explicit = _find_container_config(env)

    # Reason: A configured layout file that is missing must fail startup.
    # Impact: ContainerLoadError instead of a silent single-context fallback.
    if config_path is not None and (explicit or config_path.exists()):
        loader = ContainerLoaderRegistry().get_loader(config_path)
        return loader.load_from_file(config_path)

    # Reason: Allow running without a layout file.
    # Impact: Only the current context is deployed, so resources resolve locally
    #         unless RESOURCE_CONTEXT_PATH names the current context itself.
    container = InMemoryServletContainer()
    container.deploy(
        env.setting("CURRENT_CONTEXT_PATH", DEFAULT_CURRENT_CONTEXT),
        init_parameters=env.get(),
    )
    return container


app = FastAPI(
    title="Resource Include",
    description="静的リソースの URL を resource-serving webapp 経由で解決する",
    version="1.0.0",
)

try:
    CONTAINER = _build_container()
except ContainerLoadError as exc:
    ConsoleLogger().error("container.load_failed", error=str(exc))
    raise


@app.get("/")
def read_root():
    """ヘルスチェック"""
    return {"status": "ok", "service": "resource-include"}


@app.get("/contexts", response_model=List[ContextResponse])
def list_contexts() -> List[ContextResponse]:
    return [
        ContextResponse(path=context.context_path or "/", init_parameters=context.init_parameters)
        for context in CONTAINER.contexts()
    ]


@app.post(
    "/contexts/{context_path:path}/resource-include",
    response_model=ResourceIncludeResponse,
)
def resource_include(
    context_path: str,
    request: ResourceIncludeRequest = Body(...),
) -> ResourceIncludeResponse:
    """
    指定された web アプリケーションの中で ResourceIncludeTag を評価する

    Args:
        context_path: タグを評価する web アプリケーションの context path
        request: value, var, scope

    Returns:
        解決された URL と、var 指定がない場合は出力された文字列
    """
    servlet_context = CONTAINER.get(context_path)
    if servlet_context is None:
        raise HTTPException(status_code=404, detail=f"Context not found: {context_path}")

    logger = ConsoleLogger().bind(context_path=servlet_context.context_path)
    page_context = InMemoryPageContext(servlet_context=servlet_context)
    tag = ResourceIncludeTag(logger)
    tag.set_page_context(page_context)
    tag.value = request.value
    tag.var = request.var
    tag.scope = request.scope

    try:
        tag.do_start_tag()
        tag.do_end_tag()
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except TagError as e:
        logger.error("resource_include.failed", error=str(e))
        raise HTTPException(status_code=500, detail=str(e))

    url = tag.url or ""
    tag.release()

    if request.var is not None:
        return ResourceIncludeResponse(
            url=url,
            var=request.var,
            scope=AttributeScope.parse(request.scope).value,
        )
    return ResourceIncludeResponse(url=url, output=page_context.out.getvalue())
