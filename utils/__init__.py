"""
主控台輸入輸出的實用函數。
"""
