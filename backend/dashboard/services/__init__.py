"""外部服务与副作用钩子"""
