"""Base class of every component model."""

import itertools
import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from ..core.registry import CLASS_REGISTRY_ATTR, COMPONENT_REGISTRY, WILDCARD_SUBTYPE, parse_class_type
from ..utils.layout import LayoutMode, get_layout_params, merge_layout_param
from ..utils.merge import deep_merge

logger = logging.getLogger(__name__)

_uid_counter = itertools.count()


def get_uid(prefix: str = "cpt_model") -> str:
    """Return a process-unique id with the given prefix."""
    return f"{prefix}_{next(_uid_counter)}"


class ComponentModel:
    """A resolved component: its merged option plus identity.

    Subclasses declare their kind through class attributes:

    - ``type``: ``"main"`` or ``"main.sub"``.
    - ``default_option``: lowest-precedence option values. A subclass declared
      with ``class`` syntax should merge its parent's defaults itself, e.g.
      ``default_option = merge_all([Parent.default_option, {...}])``; classes
      built with ``ClassRegistry.extend`` get this merge automatically.
    - ``dependencies``: component types that must be resolved first.
    - ``layout_mode``: ``"box"`` or ``{"type": "box", "ignoreSize": ...}``
      when the option carries left/right/top/bottom/width/height.
    """

    type: str = "component"
    default_option: Dict[str, Any] = {}
    dependencies: List[str] = []
    layout_mode: Optional[LayoutMode] = None

    def __init__(
        self,
        option: Optional[Dict[str, Any]],
        parent_model: Any = None,
        global_model: Any = None,
        extra_opt: Optional[Dict[str, Any]] = None,
    ):
        """Build the model and merge its option.

        Args:
            option: Raw option of this component. It is merged in place.
            parent_model: Theme source, anything with ``get(main_type)``.
            global_model: Owning document model; used to look up other
                components.
            extra_opt: Identity computed by the document resolver:
                ``main_type``, ``sub_type``, ``component_index``, ``id``,
                ``name`` and ``dependent_models``.
        """
        extra_opt = extra_opt or {}
        declared = parse_class_type(self.type)

        self.option: Dict[str, Any] = option if option is not None else {}
        self.parent_model = parent_model
        self.global_model = global_model

        self.main_type: str = extra_opt.get("main_type", declared.main)
        self.sub_type: str = extra_opt.get(
            "sub_type", "" if declared.sub == WILDCARD_SUBTYPE else declared.sub
        )
        self.component_index: int = extra_opt.get("component_index", 0)
        self.id: str = extra_opt.get("id", "")
        self.name: str = extra_opt.get("name", "")
        self.dependent_models: Dict[str, List["ComponentModel"]] = extra_opt.get("dependent_models") or {}
        self.uid = get_uid("cpt_model")

        self.init(self.option, parent_model, global_model)
        self.option_updated(self.option, True)

    def __repr__(self):
        return f"<{type(self).__name__} {self.main_type}[{self.component_index}] id={self.id!r}>"

    def init(self, option: Dict[str, Any], parent_model: Any, global_model: Any) -> None:
        self.merge_default_and_theme(option, parent_model)

    def merge_default_and_theme(self, option: Dict[str, Any], theme: Any) -> None:
        """Fill ``option`` with theme values, then with default values.

        Values already in ``option`` are never overwritten, so the precedence
        is user > theme > default. Box parameters given by the user are
        reconciled against the merged result afterwards.
        """
        layout_mode = self.layout_mode
        input_position_params = get_layout_params(option) if layout_mode else {}

        if theme is not None:
            deep_merge(option, theme.get(self.main_type))
        deep_merge(option, self.get_default_option())

        if layout_mode:
            merge_layout_param(option, input_position_params, layout_mode)

    def merge_option(self, option: Dict[str, Any], global_model: Any = None) -> None:
        """Apply a patch on top of the current option; the patch wins."""
        deep_merge(self.option, option, True)

        layout_mode = self.layout_mode
        if layout_mode:
            merge_layout_param(self.option, option, layout_mode)

    # Hook after init or merge_option
    def option_updated(self, new_option: Optional[Dict[str, Any]], is_init: bool) -> None:
        pass

    def get_default_option(self) -> Dict[str, Any]:
        cls = type(self)
        registry = cls.__dict__.get(CLASS_REGISTRY_ATTR) or COMPONENT_REGISTRY
        return registry.get_default_option(cls)

    def get(self, path: Union[str, Sequence[Any], None], default: Any = None) -> Any:
        """Look up a value of the option by ``"a.b"`` or ``["a", "b"]`` path."""
        if path is None:
            return self.option
        keys = path.split(".") if isinstance(path, str) else list(path)

        value: Any = self.option
        for key in keys:
            if isinstance(value, dict):
                value = value.get(key)
            elif isinstance(value, list) and isinstance(key, int) and -len(value) <= key < len(value):
                value = value[key]
            else:
                return default
            if value is None:
                return default
        return value

    def get_referring_components(self, main_type: str) -> List["ComponentModel"]:
        """Components of ``main_type`` this one points at via ``<main_type>Index``/``Id``.

        Returns an empty list when the option names no such reference.
        """
        index = self.get(f"{main_type}Index")
        component_id = self.get(f"{main_type}Id")
        if (index is None and component_id is None) or self.global_model is None:
            return []
        return self.global_model.query_components({
            "main_type": main_type,
            "index": index,
            "id": component_id,
        })
