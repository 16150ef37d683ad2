"""
JSON serialization of extraction results
"""
import json


def records_to_dicts(records, include_called_by=False):
    items = []
    for record in records:
        data = record.to_dict()
        if include_called_by and record.called_by:
            data['calledBy'] = list(record.called_by)
        items.append(data)
    return items


def records_to_json(results, include_called_by=False, indent=2):
    """
    Serialize scan results

    Args:
        results: Mapping of file path to list of FunctionRecord
        include_called_by: Add 'calledBy' lists built by CallGraphBuilder

    Returns:
        JSON text of {path: [record, ...]}
    """
    payload = {
        path: records_to_dicts(records, include_called_by)
        for path, records in results.items()
    }
    return json.dumps(payload, indent=indent, ensure_ascii=False)
