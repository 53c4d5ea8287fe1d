from eden.builtin.env_builtin import register, new_root_environment

__all__ = ["register", "new_root_environment"]
