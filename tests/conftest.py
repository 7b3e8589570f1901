import os

# Nos testes o log fica só no console.
os.environ.setdefault("LOG_DIR", "")
