"""contact_scout.crawler: Обход сайта и модели результатов."""
