# json:api collection formatting:
# - sorting (https://jsonapi.org/format/#fetching-sorting)
#
# The document builder keeps the order of the collection it's given, applications call
# jsonapi_sort() first if they want the sort= query parameter to be honored
#
from typing import Any, Iterable, List
import jadoc
from .parameters import Parameters


def jsonapi_sort(models: Iterable[Any], parameters: Parameters) -> List[Any]:
    """
    http://jsonapi.org/format/#fetching-sorting
    sort by csv sort= values, models without a value for a sort field come last
    :param models: collection of models
    :param parameters: request parameters
    :return: sorted list of models
    """
    result = list(models)
    if not parameters.sort:
        return result

    # sorted() is stable: sort by the least significant field first
    for sort_field in reversed(parameters.sort):
        sort_attr = sort_field.field
        if not any(hasattr(model, sort_attr) for model in result):
            jadoc.log.debug(f"No attribute {sort_attr} to sort on")
            continue

        def sort_key(model, sort_attr=sort_attr, reverse=sort_field.descending):
            value = getattr(model, sort_attr, None)
            if reverse:
                return value is not None, value
            return value is None, value

        try:
            result = sorted(result, key=sort_key, reverse=sort_field.descending)
        except TypeError as exc:
            jadoc.log.warning(f"Sort failed for {sort_attr}: {exc}")

    return result
