"""
Static schema for the Tasks table created in the Growth AI base.
Field types and option shapes follow Airtable's metadata API.
"""
import copy
from typing import Any, Dict

TASKS_TABLE_NAME = 'Tasks'

TASKS_TABLE_SCHEMA: Dict[str, Any] = {
    'name': TASKS_TABLE_NAME,
    'fields': [
        {'name': 'Task Name', 'type': 'singleLineText'},
        {'name': 'Description', 'type': 'multilineText'},
        {
            'name': 'Assigned To',
            'type': 'singleSelect',
            'options': {
                'choices': [
                    {'name': 'Blake'},
                    {'name': 'Beau'},
                    {'name': 'Racquel'},
                    {'name': 'Lacy'},
                ]
            },
        },
        {
            'name': 'Priority',
            'type': 'singleSelect',
            'options': {
                'choices': [
                    {'name': 'Urgent', 'color': 'redBright'},
                    {'name': 'High', 'color': 'orangeBright'},
                    {'name': 'Medium', 'color': 'yellowBright'},
                    {'name': 'Low', 'color': 'greenBright'},
                ]
            },
        },
        {
            'name': 'Status',
            'type': 'singleSelect',
            'options': {
                'choices': [
                    {'name': 'Not Started', 'color': 'grayBright'},
                    {'name': 'In Progress', 'color': 'yellowBright'},
                    {'name': 'Review', 'color': 'orangeBright'},
                    {'name': 'Completed', 'color': 'greenBright'},
                    {'name': 'Blocked', 'color': 'redBright'},
                ]
            },
        },
        {'name': 'Due Date', 'type': 'date'},
        # Filled in by Airtable on record creation, read-only
        {'name': 'Created Date', 'type': 'createdTime'},
        {'name': 'Estimated Hours', 'type': 'number', 'options': {'precision': 1}},
        {'name': 'Actual Hours', 'type': 'number', 'options': {'precision': 1}},
        {'name': 'Progress %', 'type': 'number', 'options': {'precision': 0}},
        {
            'name': 'Tags',
            'type': 'multipleSelects',
            'options': {
                'choices': [
                    {'name': 'Development', 'color': 'blueBright'},
                    {'name': 'Marketing', 'color': 'purpleBright'},
                    {'name': 'Client Work', 'color': 'greenBright'},
                    {'name': 'Admin', 'color': 'grayBright'},
                    {'name': 'Research', 'color': 'orangeBright'},
                    {'name': 'Bug Fix', 'color': 'redBright'},
                ]
            },
        },
        {'name': 'Notes', 'type': 'multilineText'},
    ],
}


def build_task_table_schema() -> Dict[str, Any]:
    """Return a fresh copy of the Tasks schema, safe for the caller to mutate."""
    return copy.deepcopy(TASKS_TABLE_SCHEMA)
