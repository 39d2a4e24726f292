"""contact_scout.parser: Поверхностное сканирование HTML-разметки."""
