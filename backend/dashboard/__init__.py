"""个人工作台后端"""
