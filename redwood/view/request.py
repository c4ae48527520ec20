"""
Render Requests
Turns the accepted render() call shapes into one tagged request
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from redwood.exceptions import AmbiguousRenderMode, InvalidRenderOptions


class RenderMode(str, Enum):
    PAGE = 'page'
    PARTIAL = 'partial'


OPTION_KEYS = frozenset(['page', 'partial', 'layout', 'namespace', 'locals'])


@dataclass(frozen=True)
class RenderRequest:
    """
    A single render call, resolved once at the API boundary

    Usage:
        RenderRequest.parse('home')
        RenderRequest.parse('home', layout='main')
        RenderRequest.parse({'partial': 'header'})
        RenderRequest.parse(page='home', namespace='blog')
    """
    mode: RenderMode
    name: str
    layout: Optional[str] = None
    namespace: str = ''
    locals: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_page(self) -> bool:
        return self.mode is RenderMode.PAGE

    @property
    def is_partial(self) -> bool:
        return self.mode is RenderMode.PARTIAL

    @classmethod
    def page(cls, name: str, **options) -> 'RenderRequest':
        return cls.parse(page=name, **options)

    @classmethod
    def parse(cls, request: Any = None, **options: Any) -> 'RenderRequest':
        """
        Build a request from a view name, an options mapping, or keywords

        A bare string renders a page of that name; keywords then carry the
        remaining options. A mapping (or keywords alone) must set exactly
        one of 'page' or 'partial'.

        Raises:
            AmbiguousRenderMode: If both or neither of 'page'/'partial' are set
            InvalidRenderOptions: For any other malformed request
        """
        if isinstance(request, cls):
            if options:
                raise InvalidRenderOptions(
                    "Options cannot be combined with a RenderRequest",
                    options=', '.join(sorted(options))
                )
            return request

        if isinstance(request, str):
            if options.get('page') is not None or options.get('partial') is not None:
                raise AmbiguousRenderMode(
                    "A view name cannot be combined with 'page' or 'partial' options",
                    view=request
                )
            merged = dict(options, page=request)
        elif isinstance(request, Mapping):
            merged = dict(request)
            merged.update(options)
        elif request is None:
            merged = dict(options)
        else:
            raise InvalidRenderOptions(
                "Render options must be a view name or a mapping of options",
                given=type(request).__name__
            )

        return cls._from_options(merged)

    @classmethod
    def _from_options(cls, options: Dict[Any, Any]) -> 'RenderRequest':
        unknown = [key for key in options if key not in OPTION_KEYS]
        if unknown:
            raise InvalidRenderOptions(
                "Unknown render option",
                options=', '.join(sorted(str(key) for key in unknown))
            )

        page = options.get('page')
        partial = options.get('partial')
        if (page is None) == (partial is None):
            raise AmbiguousRenderMode(
                "Exactly one of 'page' or 'partial' must be given",
                page=page, partial=partial
            )

        mode = RenderMode.PAGE if page is not None else RenderMode.PARTIAL
        name = page if page is not None else partial

        for key in ('layout', 'namespace'):
            value = options.get(key)
            if value is not None and not isinstance(value, str):
                raise InvalidRenderOptions(
                    f"Render option '{key}' must be a string",
                    given=type(value).__name__
                )
        if not isinstance(name, str):
            raise InvalidRenderOptions(
                f"Render option '{mode.value}' must be a view name",
                given=type(name).__name__
            )

        layout = options.get('layout')
        if layout is not None and mode is RenderMode.PARTIAL:
            raise InvalidRenderOptions("Layouts apply to pages only", partial=name, layout=layout)

        render_locals = options.get('locals')
        if render_locals is None:
            render_locals = {}
        elif not isinstance(render_locals, Mapping):
            raise InvalidRenderOptions(
                "Render option 'locals' must be a mapping",
                given=type(render_locals).__name__
            )

        return cls(
            mode=mode,
            name=name,
            layout=layout,
            namespace=options.get('namespace') or '',
            locals=dict(render_locals),
        )
