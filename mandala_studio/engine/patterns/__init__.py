"""Built-in pattern variants. Each module registers one handler."""
