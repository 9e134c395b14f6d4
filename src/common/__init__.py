"""
どこで: `common` パッケージ。
何を: palettekit と CLI で使う軽量基盤（環境変数パース、設定、ロギング）。
なぜ: ライブラリ本体から設定/ロギングの初期化を切り離し、依存の向きを単純化するため。
"""
