"""User-profile domain: the record both metrics and palate logic work on."""
