# digest_catalog/__main__.py
from digest_catalog.cli import main

main()
