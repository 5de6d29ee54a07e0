CONFIG = {
    'commands': {
        'modules': [
            'objadapter.commands.shapes',
            'objadapter.commands.members',
            'objadapter.commands.fields',
            'objadapter.commands.discovery',
            'objadapter.commands.copying',
            'objadapter.commands.filling',
            'objadapter.commands.sql',
            'objadapter.tables.commands',
        ],
    },
    'columns': {
        # Column name used for numbers and other scalar values.
        'value': 'Value',
        # Column name used for strings.
        'text': 'Text',
    },
}
