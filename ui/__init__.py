"""Front-ends: command shell and Textual interface"""
