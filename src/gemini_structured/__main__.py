from gemini_structured._driver import main

if __name__ == "__main__":
    main()
