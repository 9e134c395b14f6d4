"""
どこで: `util` パッケージ。
何を: CLI から使う補助（YAML 構成の読み込み）。
"""
