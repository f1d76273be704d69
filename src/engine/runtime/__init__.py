"""
どこで: `engine.runtime` サブパッケージ。
何を: 入力集約・tick スケジューラ・終了判定を提示層と結線するループ本体を提供。
なぜ: 提示層（pyglet）に依存しない形でループの不変条件をテスト可能にするため。
"""
