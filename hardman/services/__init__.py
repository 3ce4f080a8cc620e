"""Session services: stores, chat assistant, motivation loop"""
