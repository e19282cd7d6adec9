import cattrs

TRUE = frozenset({"true", "yes", "on", "1"})
FALSE = frozenset({"false", "no", "off", "0"})


def _structure_bool(value: str | bool, _) -> bool:
    if isinstance(value, bool):
        return value

    if (lowered := value.strip().lower()) in TRUE:
        return True
    elif lowered in FALSE:
        return False

    raise ValueError(f"not a boolean: {value!r}")


converter = cattrs.Converter(omit_if_default=True)
converter.register_structure_hook(bool, _structure_bool)
converter.register_unstructure_hook(bool, lambda b: "true" if b else "false")
