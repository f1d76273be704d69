"""
どこで: `engine.core` サブパッケージ。
何を: ピクセルバッファ・キー集約・tick 時計・終了判定・ユーザ契約・描画ウィンドウを提供。
なぜ: ループの基盤を構成し、上位層（runtime/pixloop）から再利用可能にするため。

`render_window` は pyglet を import するため、ここでは再輸出しない（ヘッドレス環境での import を避ける）。
"""
