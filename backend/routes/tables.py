from flask import Blueprint, jsonify, current_app
from utils.logger import add_log
from utils.schema import build_task_table_schema, TASKS_TABLE_NAME
from utils.airtable_client import ApiError, UpstreamApiError

tables_bp = Blueprint('tables', __name__)


def _client():
    return current_app.extensions['airtable_client']


@tables_bp.post('/create-table')
def create_table_route():
    """Create the Tasks table in the Growth AI base.
    Output: { success, message, tableId, tableName, fields }
    Not idempotent: a second call is rejected upstream as a duplicate name.
    """
    try:
        add_log('Starting table creation process...')
        schema = build_task_table_schema()

        add_log('Sending table creation request to Airtable...')
        table = _client().create_table(schema)
    except ApiError as e:
        error_msg = f"Failed to create table: {e.message}"
        add_log(error_msg)
        payload = {'success': False, 'error': error_msg}
        if e.details is not None:
            payload['details'] = e.details
        return jsonify(payload), 500

    add_log(f"Table created successfully! Table ID: {table['id']}")
    return jsonify({
        'success': True,
        'message': f"{TASKS_TABLE_NAME} table created successfully in Growth AI base!",
        'tableId': table['id'],
        'tableName': table['name'],
        'fields': table['field_count'],
    })


@tables_bp.post('/test')
def test_route():
    """Check the Airtable connection by listing the base's tables.
    Output: { success, message, existingTables, ready }
    `ready` is true while the Tasks table does not exist yet.
    """
    try:
        add_log('Running test - checking Airtable connection...')
        existing_tables = _client().list_tables()
    except UpstreamApiError as e:
        # Only the status line here; the upstream message is relayed by /create-table
        error_msg = f"Test failed: {e.status_message}"
        add_log(error_msg)
        return jsonify({'success': False, 'error': error_msg}), 500
    except ApiError as e:
        error_msg = f"Test failed: {e.message}"
        add_log(error_msg)
        return jsonify({'success': False, 'error': error_msg}), 500

    add_log(f"Connection successful. Found {len(existing_tables)} existing tables")
    return jsonify({
        'success': True,
        'message': 'Airtable connection working',
        'existingTables': existing_tables,
        'ready': TASKS_TABLE_NAME not in existing_tables,
    })
