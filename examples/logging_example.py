"""Demonstrates how to enable and configure logging in id3kit.

id3kit logging is disabled by default. Users opt in by calling ``enable_logging()``,
which returns a ``LoggingHandle``. The handle can be used as a context manager
(``with enable_logging(): ...``) or disabled manually via ``handle.disable()``.
When the last active handle is disabled, id3kit logging is automatically turned off.

Key concepts shown here:

- ``level``: controls the minimum log level. The custom ``SPLIT`` level
  (numeric value 15, between DEBUG and INFO) surfaces every attribute chosen
  while growing a tree and is the default. ``"DEBUG"`` also shows leaves.
- ``log_format``: ``"short"`` shows ``timestamp | level | function - message``;
  ``"full"`` adds the module and line number.
"""

import polars as pl

from id3kit import enable_logging, render_tree, summarize_tree, train_model_on_table
from id3kit.polars_utils import table_from_dataframe

df = pl.DataFrame({
    "outlook": ["sunny", "sunny", "overcast", "rainy", "rainy", "rainy", "overcast"],
    "humidity": ["high", "high", "high", "high", "normal", "normal", "normal"],
    "windy": ["FALSE", "TRUE", "FALSE", "FALSE", "FALSE", "TRUE", "TRUE"],
    "play": ["no", "no", "yes", "yes", "yes", "no", "yes"],
})
table = table_from_dataframe(df, name="weather")
play = table.last_attribute()

# Show split decisions and leaves while the tree grows
with enable_logging(level="DEBUG", log_format="full"):
    root = train_model_on_table(table, play)

print(f"\n{render_tree(root)}\n")

summary = summarize_tree(root, table, play)
for rule in summary.rules:
    print(f"{rule}  (samples={rule.samples}, confidence={rule.confidence:.2f})")
print(f"\nTraining accuracy: {summary.metrics['accuracy']:.2f}")

# Outside the with block nothing is logged
train_model_on_table(table, play)
