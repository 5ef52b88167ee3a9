from id3py import Table, enable_logging, train

table = Table.from_records(
    ["Color", "Diameter", "Label"],
    [
        ("Green", "3", "Apple"),
        ("Yellow", "3", "Apple"),
        ("Red", "1", "Grape"),
        ("Red", "1", "Grape"),
        ("Yellow", "3", "Lemon"),
    ],
)

with enable_logging(level="DEBUG"):
    tree = train(table)

tree.print_tree()

queries = [
    {"Color": "Green", "Diameter": "3"},
    {"Color": "Yellow", "Diameter": "3"},
    {"Color": "Red", "Diameter": "1"},
    {"Color": "Red"},  # wrong feature count
]
with enable_logging(level="WARNING"):
    for record in queries:
        result = tree.query(record)
        if result.ok:
            print(f"{record} -> {result.answer.label} ({result.answer.confidence}%)")
        else:
            print(f"{record} -> rejected: {result.error.value}")

for rule in tree.export_rules():
    print(rule)
