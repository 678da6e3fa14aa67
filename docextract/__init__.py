"""Documentation extraction and inheritdoc resolution for C#-style declarations."""
