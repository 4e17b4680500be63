def obj_set(delimiter=',', container=list, item_type=str):
    """
    Convert a CSV value into a collection of values.

    Args:
        delimiter (str): the delimiter of the CSV value.

        container (callable): The type of the container of the values.
            Defaults to :obj:`list`.

        item_type (callable): The type of the value to be mapped to.
            Defaults to :obj:`str`.

    Returns:
        container<item_type>: The mapped value of the csv.
    """

    def deserializer(value):
        value = value or ''
        items = value.split(delimiter)

        value = [
            item_type(item.strip())
            for item in items
            if item.strip()
        ]

        return container(value)

    return deserializer


def module_list(value):
    """
    Normalize modules into an ordered tuple of names.

    A string is read as a comma separated list. Order is kept and
    duplicates are not removed, blank names are dropped.
    """
    if isinstance(value, str):
        return obj_set(',', tuple)(value)

    return tuple(
        str(item).strip()
        for item in (value or [])
        if str(item).strip()
    )


def parse_env_pairs(values):
    """
    Convert ``KEY=VALUE`` strings into a dict, keeping their order.

    Raises:
        ValueError: when a value has no ``=`` or an empty key.
    """
    result = {}

    for value in values:
        key, sep, val = value.partition('=')
        key = key.strip()

        if not sep or not key:
            raise ValueError(
                "Invalid environment value {!r}, expected KEY=VALUE".format(
                    value
                )
            )

        result[key] = val

    return result
