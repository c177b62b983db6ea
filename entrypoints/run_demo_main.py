import runpy
import traceback

def main():
    try:
        # Equivalent to: python -m mvcbus.dev.run_demo
        runpy.run_module("mvcbus.dev.run_demo", run_name="__main__")
    except Exception:
        traceback.print_exc()
        input("\nPress Enter to exit...")

if __name__ == "__main__":
    main()
