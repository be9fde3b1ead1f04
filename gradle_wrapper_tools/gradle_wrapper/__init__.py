"""
Resolves the Java runtime a Gradle wrapper project needs
"""
