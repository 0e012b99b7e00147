from .mk_font_img import main

main()
