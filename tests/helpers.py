"""Test doubles and class factories."""

from chartopt_lab.model.component import ComponentModel


def make_component(name: str, dependencies=None, default_option=None, base=ComponentModel, **attrs):
    """Declare a ComponentModel subclass on the fly."""
    attrs.update({
        "dependencies": list(dependencies or []),
        "default_option": dict(default_option or {}),
    })
    return type(name, (base,), attrs)


class StubTheme:
    """Theme stand-in returning fixed fragments."""

    def __init__(self, fragments=None):
        self.fragments = fragments or {}

    def get(self, main_type):
        return self.fragments.get(main_type)


class StubGlobalModel:
    """Records component queries and answers from a fixed table."""

    def __init__(self, components=None):
        self.components = components or {}
        self.queries = []

    def query_components(self, condition):
        self.queries.append(condition)
        models = self.components.get(condition["main_type"], [])
        index = condition.get("index")
        if index is not None:
            indices = index if isinstance(index, list) else [index]
            return [models[i] for i in indices if 0 <= i < len(models)]
        return [m for m in models if m.id == condition.get("id")]
